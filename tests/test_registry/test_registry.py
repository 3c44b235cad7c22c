"""Tests for the at-rule registry and its extension point."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from json2css import (
    AtRuleRegistry,
    EncoderConfig,
    UnknownIdentifierTypeError,
    decode_statements,
    encode,
)
from json2css.model import (
    AtRule,
    CharsetInformation,
    FontFaceInformation,
    Identifier,
    Information,
    KeyframesInformation,
    MediaInformation,
    Statement,
)


@dataclass(frozen=True)
class ImportInformation(Information):
    """``@import "theme.css"`` -- registered only in tests."""

    tag: ClassVar[str] = "import"

    url: str = ""

    def accept(self, encoder) -> None:
        encoder.writer.double_quote()
        encoder.writer.text(self.url)
        encoder.writer.double_quote()


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------


class TestDefaultRegistry:
    def test_tags(self):
        assert sorted(AtRuleRegistry.default().tags()) == ["charset", "font-face", "keyframes", "media"]

    @pytest.mark.parametrize(
        "tag, variant",
        [
            ("charset", CharsetInformation),
            ("keyframes", KeyframesInformation),
            ("media", MediaInformation),
            ("font-face", FontFaceInformation),
        ],
    )
    def test_lookup(self, tag, variant):
        assert AtRuleRegistry.default().lookup(tag) is variant

    def test_lookup_unknown(self):
        with pytest.raises(UnknownIdentifierTypeError):
            AtRuleRegistry.default().lookup("unknown")

    def test_contains(self):
        registry = AtRuleRegistry.default()
        assert "media" in registry
        assert "import" not in registry
        assert len(registry) == 4


# ---------------------------------------------------------------------------
# Construction and extension
# ---------------------------------------------------------------------------


class TestExtension:
    def test_with_variant_returns_new_registry(self):
        base = AtRuleRegistry.default()
        extended = base.with_variant(ImportInformation)
        assert "import" in extended
        assert "import" not in base

    def test_with_variant_explicit_tag(self):
        registry = AtRuleRegistry.default().with_variant(CharsetInformation, tag="encoding")
        assert registry.lookup("encoding") is CharsetInformation

    def test_rejects_non_information(self):
        with pytest.raises(TypeError):
            AtRuleRegistry({"bogus": dict})  # type: ignore[dict-item]

    def test_rejects_empty_tag(self):
        with pytest.raises(ValueError):
            AtRuleRegistry({"": CharsetInformation})

    def test_encode_custom_variant(self):
        config = EncoderConfig(registry=AtRuleRegistry.default().with_variant(ImportInformation))
        stmt = Statement(atrule=AtRule(identifier=Identifier("import", ImportInformation("theme.css"))))
        assert encode([stmt], config) == b'@import "theme.css";'

    def test_custom_variant_unknown_by_default(self):
        stmt = Statement(atrule=AtRule(identifier=Identifier("import", ImportInformation("theme.css"))))
        with pytest.raises(UnknownIdentifierTypeError):
            encode([stmt])

    def test_decode_custom_variant(self):
        config = EncoderConfig(registry=AtRuleRegistry.default().with_variant(ImportInformation))
        payload = [{"atrule": {"ident": {"type": "import", "info": {"url": "theme.css"}}}}]
        statements = decode_statements(payload, config)
        assert statements[0].atrule.identifier.information == ImportInformation("theme.css")
        assert encode(statements, config) == b'@import "theme.css";'
