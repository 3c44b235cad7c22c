"""Primitive token writer: punctuation and text onto a binary sink."""

from __future__ import annotations

import io
from typing import Protocol


class Sink(Protocol):
    """Anything that accepts bytes, e.g. ``io.BytesIO`` or a binary file."""

    def write(self, data: bytes, /) -> object: ...


SPACE = b" "
DOUBLE_QUOTE = b'"'
LEFT_PARENTHESIS = b"("
RIGHT_PARENTHESIS = b")"
COMMA = b","
PERIOD = b"."
COLON = b":"
SEMICOLON = b";"
AT_SIGN = b"@"
LEFT_SQUARE_BRACKET = b"["
RIGHT_SQUARE_BRACKET = b"]"
LEFT_CURLY_BRACKET = b"{"
RIGHT_CURLY_BRACKET = b"}"


class TokenWriter:
    """Writes CSS tokens to a sink.

    Errors raised by the sink propagate unchanged.
    """

    def __init__(self, sink: Sink | None = None, encoding: str = "utf-8") -> None:
        self.sink: Sink = sink if sink is not None else io.BytesIO()
        self.encoding = encoding
        self.written = 0

    def raw(self, data: bytes) -> None:
        if data:
            self.sink.write(data)
            self.written += len(data)

    def text(self, value: str) -> None:
        self.raw(value.encode(self.encoding))

    def getvalue(self) -> bytes:
        """Return everything written so far (in-memory sinks only)."""
        if not isinstance(self.sink, io.BytesIO):
            raise TypeError("getvalue() needs an io.BytesIO sink")
        return self.sink.getvalue()

    # --- punctuation -----------------------------------------------------------

    def space(self) -> None:
        self.raw(SPACE)

    def double_quote(self) -> None:
        self.raw(DOUBLE_QUOTE)

    def open_paren(self) -> None:
        self.raw(LEFT_PARENTHESIS)

    def close_paren(self) -> None:
        self.raw(RIGHT_PARENTHESIS)

    def comma(self) -> None:
        self.raw(COMMA)

    def period(self) -> None:
        self.raw(PERIOD)

    def colon(self) -> None:
        self.raw(COLON)

    def semicolon(self) -> None:
        self.raw(SEMICOLON)

    def at_sign(self) -> None:
        self.raw(AT_SIGN)

    def open_bracket(self) -> None:
        self.raw(LEFT_SQUARE_BRACKET)

    def close_bracket(self) -> None:
        self.raw(RIGHT_SQUARE_BRACKET)

    def open_brace(self) -> None:
        self.raw(LEFT_CURLY_BRACKET)

    def close_brace(self) -> None:
        self.raw(RIGHT_CURLY_BRACKET)
