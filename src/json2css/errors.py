"""Error hierarchy for json2css."""
from __future__ import annotations


class Json2CssError(Exception):
    """Base error for all json2css errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EncodeError(Json2CssError):
    """A stylesheet tree could not be rendered as CSS text."""


class MissingDeclarationError(EncodeError):
    """A ruleset has no declarations."""

    def __init__(self, message: str = "ruleset has no declarations", **kwargs) -> None:
        super().__init__(message, **kwargs)


class MissingSelectorError(EncodeError):
    """A ruleset has no selectors and the encoder requires them."""

    def __init__(self, message: str = "ruleset has no selectors", **kwargs) -> None:
        super().__init__(message, **kwargs)


class UnknownIdentifierTypeError(EncodeError):
    """An at-rule type tag has no registered information variant.

    Raised at decode time for JSON payloads and again at encode time for
    hand-built trees.
    """

    def __init__(self, type_name: str, message: str | None = None, **kwargs) -> None:
        super().__init__(message or f"unknown at-rule type: {type_name!r}", **kwargs)
        self.type_name = type_name


class NestingTooDeepError(EncodeError):
    """Negation or at-rule nesting exceeded the configured depth."""

    def __init__(self, max_depth: int, **kwargs) -> None:
        super().__init__(f"nesting deeper than {max_depth} levels", **kwargs)
        self.max_depth = max_depth


class DecodeError(Json2CssError):
    """A JSON payload does not describe a valid stylesheet tree."""

    def __init__(self, message: str, path: str = "$", **kwargs) -> None:
        super().__init__(f"{path}: {message}", **kwargs)
        self.path = path
