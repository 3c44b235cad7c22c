"""Selector model: Pseudo, Attribute, Simple, Combinator, and Selector dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pseudo:
    """A pseudo-class or pseudo-element, optionally with a function argument.

    Renders as ``ident`` or ``ident(func)``; the leading colons are added by
    the owning simple selector.
    """

    ident: str
    func: str = ""


@dataclass(frozen=True)
class Attribute:
    """An attribute matcher such as ``[href*=".com" s]``."""

    attr: str
    operator: str = ""  # "=", "~=", "|=", "^=", "$=", "*="
    value: str = ""
    modifier: str = ""  # "i", "s"


@dataclass(frozen=True)
class Simple:
    """A sequence of simple selectors bound to one element.

    Negations are themselves ``Simple`` selectors, so ``:not(:not(a))`` is
    representable.
    """

    element: str = ""  # "div", "*", "ns|*"
    classes: tuple[str, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    pseudo_elements: tuple[Pseudo, ...] = ()
    pseudo_classes: tuple[Pseudo, ...] = ()
    negations: tuple[Simple, ...] = ()


@dataclass(frozen=True)
class Combinator:
    """A relationship operator followed by the simple selector it introduces."""

    combinator: str  # ">", "~", "+", or " " for descendant
    simple: Simple


@dataclass(frozen=True)
class Selector:
    """A head simple selector followed by a chain of combinators."""

    simple: Simple
    combinators: tuple[Combinator, ...] = ()
