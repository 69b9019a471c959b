from chronorange.formatting.formatter import DateFormatter, create_formatter
from chronorange.formatting.tokenizer import FIELD_TOKENS, Token, tokenize

__all__ = [
    "DateFormatter",
    "create_formatter",
    "FIELD_TOKENS",
    "Token",
    "tokenize",
]
