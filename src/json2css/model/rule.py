"""Rule model: declarations, rulesets, at-rules, and statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from json2css.model.selector import Selector

if TYPE_CHECKING:
    from json2css.model.information import Information


@dataclass(frozen=True)
class Value:
    """One comma-separated group of a property value; tokens are space-joined."""

    tokens: tuple[str, ...]


@dataclass(frozen=True)
class Declaration:
    """A property with one or more value groups.

    ``background: url(a.png) no-repeat, red`` is a single declaration with
    two groups.
    """

    property: str
    values: tuple[Value, ...] = ()

    @classmethod
    def of(cls, property: str, *tokens: str) -> Declaration:
        """Build a declaration holding a single value group."""
        return cls(property=property, values=(Value(tokens=tuple(tokens)),))


@dataclass(frozen=True)
class Ruleset:
    """A selector list paired with a declaration block."""

    selectors: tuple[Selector, ...] = ()
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class Identifier:
    """The head of an at-rule: its type tag and the tag-specific payload."""

    type: str
    information: Information | None = None


@dataclass(frozen=True)
class AtRule:
    """An at-rule and the statements nested in its block, if any."""

    identifier: Identifier
    nested: tuple[Statement, ...] = ()


@dataclass(frozen=True)
class Statement:
    """Either an at-rule or a ruleset.

    A statement with neither set is legal and renders as nothing.
    """

    atrule: AtRule | None = None
    ruleset: Ruleset | None = None

    def __post_init__(self) -> None:
        if self.atrule is not None and self.ruleset is not None:
            raise ValueError("Statement must hold an at-rule or a ruleset, not both")
