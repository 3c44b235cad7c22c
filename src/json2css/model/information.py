"""At-rule information variants.

Each variant names the at-rule tag it belongs to and hands itself to the
matching ``Encoder`` method through :meth:`Information.accept`. A new at-rule
needs only a new subclass and an entry in the registry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from json2css.model.media import Query
from json2css.model.rule import Declaration

if TYPE_CHECKING:
    from json2css.encoder.encode import Encoder


class Information(ABC):
    """Base class for the payload of an at-rule identifier."""

    tag: ClassVar[str] = ""

    @abstractmethod
    def accept(self, encoder: Encoder) -> None:
        """Write this payload through the matching encoder method."""


@dataclass(frozen=True)
class CharsetInformation(Information):
    """``@charset "utf-8"``"""

    tag: ClassVar[str] = "charset"

    value: str = ""

    def accept(self, encoder: Encoder) -> None:
        encoder.encode_charset(self)


@dataclass(frozen=True)
class KeyframesInformation(Information):
    """``@keyframes slide``; the frames are the at-rule's nested statements."""

    tag: ClassVar[str] = "keyframes"

    value: str = ""

    def accept(self, encoder: Encoder) -> None:
        encoder.encode_keyframes(self)


@dataclass(frozen=True)
class MediaInformation(Information):
    """``@media screen and (min-width:600px),print``"""

    tag: ClassVar[str] = "media"

    queries: tuple[Query, ...] = ()

    def accept(self, encoder: Encoder) -> None:
        encoder.encode_media(self)


@dataclass(frozen=True)
class FontFaceInformation(Information):
    """``@font-face {font-family:Foo;src:url(foo.woff)}``"""

    tag: ClassVar[str] = "font-face"

    declarations: tuple[Declaration, ...] = ()

    def accept(self, encoder: Encoder) -> None:
        encoder.encode_font_face(self)
