"""Tests for the stylesheet model dataclasses."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from json2css.model import (
    AtRule,
    CharsetInformation,
    Combinator,
    Declaration,
    FontFaceInformation,
    Identifier,
    Information,
    KeyframesInformation,
    MediaInformation,
    Pseudo,
    Ruleset,
    Selector,
    Simple,
    Statement,
    Value,
)


# ---------------------------------------------------------------------------
# Declaration
# ---------------------------------------------------------------------------


class TestDeclaration:
    def test_of_builds_single_group(self):
        decl = Declaration.of("border", "1px", "solid", "red")
        assert decl.values == (Value(tokens=("1px", "solid", "red")),)

    def test_empty_property_allowed(self):
        assert Declaration(property="").property == ""

    def test_equality(self):
        assert Declaration.of("color", "red") == Declaration.of("color", "red")


# ---------------------------------------------------------------------------
# Statement
# ---------------------------------------------------------------------------


class TestStatement:
    def test_both_branches_rejected(self):
        with pytest.raises(ValueError, match="not both"):
            Statement(
                atrule=AtRule(identifier=Identifier(type="charset")),
                ruleset=Ruleset(declarations=(Declaration.of("color", "red"),)),
            )

    def test_empty_statement_allowed(self):
        stmt = Statement()
        assert stmt.atrule is None
        assert stmt.ruleset is None


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_empty_combinator_allowed(self):
        assert Combinator(combinator="", simple=Simple(element="p")).combinator == ""

    def test_negations_nest(self):
        inner = Simple(pseudo_classes=(Pseudo(ident="hover"),))
        outer = Simple(element="a", negations=(Simple(negations=(inner,)),))
        assert outer.negations[0].negations[0] is inner

    def test_nodes_are_hashable(self):
        sel = Selector(simple=Simple(element="div", classes=("a", "b")))
        assert sel in {sel}


# ---------------------------------------------------------------------------
# Information variants
# ---------------------------------------------------------------------------


class TestInformationTags:
    def test_tags(self):
        assert CharsetInformation.tag == "charset"
        assert KeyframesInformation.tag == "keyframes"
        assert MediaInformation.tag == "media"
        assert FontFaceInformation.tag == "font-face"

    def test_tag_is_not_a_field(self):
        info = CharsetInformation(value="utf-8")
        assert info == CharsetInformation("utf-8")


class TestFrozen:
    def test_simple_is_frozen(self):
        simple = Simple(element="p")
        with pytest.raises(AttributeError):
            simple.element = "span"  # type: ignore[misc]

    def test_information_is_frozen(self):
        info = KeyframesInformation(value="slide")
        with pytest.raises(AttributeError):
            info.value = "fade"  # type: ignore[misc]


class TestInformationBase:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Information()  # type: ignore[abstract]

    def test_variant_without_accept_cannot_be_built(self):
        @dataclass(frozen=True)
        class PageInformation(Information):
            tag: ClassVar[str] = "page"

            value: str = ""

        with pytest.raises(TypeError):
            PageInformation(value=":first")
