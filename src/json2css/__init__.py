"""json2css -- render a JSON-described stylesheet tree as CSS text."""

__version__ = "0.1.0"

from json2css.config import EncoderConfig
from json2css.decoder import decode_statements, statements_to_json
from json2css.encoder import Encoder, TokenWriter, encode, encode_to
from json2css.errors import (
    DecodeError,
    EncodeError,
    Json2CssError,
    MissingDeclarationError,
    MissingSelectorError,
    NestingTooDeepError,
    UnknownIdentifierTypeError,
)
from json2css.registry import AtRuleRegistry

__all__ = [
    "__version__",
    # encoding
    "encode",
    "encode_to",
    "Encoder",
    "TokenWriter",
    "EncoderConfig",
    "AtRuleRegistry",
    # json
    "decode_statements",
    "statements_to_json",
    # errors
    "Json2CssError",
    "EncodeError",
    "DecodeError",
    "MissingDeclarationError",
    "MissingSelectorError",
    "UnknownIdentifierTypeError",
    "NestingTooDeepError",
]
