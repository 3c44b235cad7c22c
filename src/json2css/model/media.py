"""Media query model: MediaType, Condition, and Query dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaType:
    """A media type with an optional ``only``/``not`` prefix."""

    value: str
    operator: str = ""


@dataclass(frozen=True)
class Condition:
    """A parenthesised media feature test, e.g. ``and (min-width:600px)``."""

    feature: str
    value: str
    operator: str = ""  # "and", "or"


@dataclass(frozen=True)
class Query:
    """A media type followed by zero or more conditions."""

    type: MediaType | None = None
    conditions: tuple[Condition, ...] = ()
