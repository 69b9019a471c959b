"""Tests for the format tokenizer."""
from chronorange.formatting.tokenizer import Token, tokenize


def fields(fmt):
    return [t.text for t in tokenize(fmt) if t.is_field]


def test_date_format():
    assert tokenize("YYYY-MM-DD") == (
        Token("YYYY", True),
        Token("-", False),
        Token("MM", True),
        Token("-", False),
        Token("DD", True),
    )


def test_long_names():
    assert fields("dddd, MMMM DD") == ["dddd", "MMMM", "DD"]
    assert fields("ddd MMM") == ["ddd", "MMM"]


def test_time_tokens():
    assert fields("HH:mm:ss.SSS") == ["HH", "mm", "ss", "SSS"]
    assert fields("hh:mm a A") == ["hh", "mm", "a", "A"]


def test_unknown_runs_are_literal():
    assert tokenize("YY") == (Token("YY", False),)
    assert tokenize("YYYYTHH") == (
        Token("YYYY", True),
        Token("T", False),
        Token("HH", True),
    )


def test_escaped_text():
    assert tokenize("[Today is] dddd") == (
        Token("Today is ", False),
        Token("dddd", True),
    )


def test_escaped_tokens_stay_literal():
    assert tokenize("[YYYY] YYYY") == (Token("YYYY ", False), Token("YYYY", True))


def test_unclosed_escape_runs_to_end():
    assert tokenize("YYYY [at MM") == (Token("YYYY", True), Token(" at MM", False))


def test_empty_escape_dropped():
    assert tokenize("[]YYYY") == (Token("YYYY", True),)


def test_empty_format():
    assert tokenize("") == ()
