"""json2css model layer -- public type re-exports."""

from json2css.model.information import (
    CharsetInformation,
    FontFaceInformation,
    Information,
    KeyframesInformation,
    MediaInformation,
)
from json2css.model.media import Condition, MediaType, Query
from json2css.model.rule import AtRule, Declaration, Identifier, Ruleset, Statement, Value
from json2css.model.selector import Attribute, Combinator, Pseudo, Selector, Simple

__all__ = [
    # selector
    "Pseudo",
    "Attribute",
    "Simple",
    "Combinator",
    "Selector",
    # rule
    "Value",
    "Declaration",
    "Ruleset",
    "Identifier",
    "AtRule",
    "Statement",
    # media
    "MediaType",
    "Condition",
    "Query",
    # information
    "Information",
    "CharsetInformation",
    "KeyframesInformation",
    "MediaInformation",
    "FontFaceInformation",
]
