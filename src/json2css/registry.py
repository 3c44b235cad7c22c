"""At-rule registry: maps at-rule type tags to information variants."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from json2css.errors import UnknownIdentifierTypeError
from json2css.model.information import (
    CharsetInformation,
    FontFaceInformation,
    Information,
    KeyframesInformation,
    MediaInformation,
)

DEFAULT_VARIANTS: tuple[type[Information], ...] = (
    CharsetInformation,
    KeyframesInformation,
    MediaInformation,
    FontFaceInformation,
)


class AtRuleRegistry:
    """Immutable mapping from at-rule tag to ``Information`` subclass.

    The decoder uses it to pick the class an ``info`` payload is built into;
    the encoder uses it to reject identifiers whose tag or payload type is
    not registered. Extending the registry returns a new instance.
    """

    def __init__(self, variants: Mapping[str, type[Information]]) -> None:
        for tag, variant in variants.items():
            if not tag:
                raise ValueError("At-rule tag must be a non-empty string")
            if not (isinstance(variant, type) and issubclass(variant, Information)):
                raise TypeError(f"{variant!r} is not an Information subclass")
        self._variants = MappingProxyType(dict(variants))

    @classmethod
    def default(cls) -> AtRuleRegistry:
        """Registry holding charset, keyframes, media, and font-face."""
        return cls({variant.tag: variant for variant in DEFAULT_VARIANTS})

    def with_variant(self, variant: type[Information], tag: str | None = None) -> AtRuleRegistry:
        """Return a copy of this registry with *variant* registered.

        The tag defaults to the variant's own ``tag`` class attribute.
        """
        variants = dict(self._variants)
        variants[tag or variant.tag] = variant
        return AtRuleRegistry(variants)

    def lookup(self, tag: str) -> type[Information]:
        """Return the variant registered for *tag*."""
        try:
            return self._variants[tag]
        except KeyError:
            raise UnknownIdentifierTypeError(tag) from None

    def tags(self) -> list[str]:
        return list(self._variants)

    def __contains__(self, tag: object) -> bool:
        return tag in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        return f"AtRuleRegistry({self.tags()!r})"
