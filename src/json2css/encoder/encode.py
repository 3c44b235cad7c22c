"""Recursive encoder from a stylesheet tree to CSS bytes.

Output is canonical and compact: no whitespace beyond what the grammar needs,
sequences rendered in input order, and a ``;`` after every top-level
statement (including the last).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

from json2css.config import EncoderConfig
from json2css.encoder.writer import Sink, TokenWriter
from json2css.errors import (
    MissingDeclarationError,
    MissingSelectorError,
    NestingTooDeepError,
    UnknownIdentifierTypeError,
)
from json2css.model.information import (
    CharsetInformation,
    FontFaceInformation,
    KeyframesInformation,
    MediaInformation,
)
from json2css.model.media import Condition, MediaType, Query
from json2css.model.rule import AtRule, Declaration, Identifier, Ruleset, Statement, Value
from json2css.model.selector import Attribute, Combinator, Pseudo, Selector, Simple

__all__ = ["Encoder", "encode", "encode_to"]

logger = logging.getLogger(__name__)


class Encoder:
    """Writes stylesheet nodes to a :class:`TokenWriter`.

    One encoder serves one output; create a new one per document. Every
    method returns on the first error, leaving whatever was already written
    in the sink.
    """

    def __init__(self, writer: TokenWriter, config: EncoderConfig | None = None) -> None:
        self.writer = writer
        self.config = config or EncoderConfig()
        self._depth = 0

    @contextmanager
    def _nested(self) -> Iterator[None]:
        if self._depth >= self.config.max_depth:
            raise NestingTooDeepError(self.config.max_depth)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    # --- statements -------------------------------------------------------------

    def encode_statements(self, statements: Iterable[Statement]) -> int:
        """Encode top-level statements, each followed by ``;``.

        Returns the number of statements written.
        """
        count = 0
        for statement in statements:
            self.encode_statement(statement)
            self.writer.semicolon()
            count += 1
        return count

    def encode_statement(self, statement: Statement) -> None:
        if statement.atrule is not None:
            self.encode_atrule(statement.atrule)
        elif statement.ruleset is not None:
            self.encode_ruleset(statement.ruleset)

    def encode_atrule(self, atrule: AtRule) -> None:
        self.encode_identifier(atrule.identifier)
        if not atrule.nested:
            return
        with self._nested():
            self.writer.open_brace()
            for statement in atrule.nested:
                self.encode_statement(statement)
            self.writer.close_brace()

    def encode_identifier(self, identifier: Identifier) -> None:
        registry = self.config.registry
        if identifier.type not in registry:
            raise UnknownIdentifierTypeError(identifier.type)
        info = identifier.information
        variant = registry.lookup(identifier.type)
        if info is not None and not isinstance(info, variant):
            raise UnknownIdentifierTypeError(
                identifier.type,
                f"at-rule type {identifier.type!r} expects {variant.__name__}, "
                f"got {type(info).__name__}",
            )

        self.writer.at_sign()
        self.writer.text(identifier.type)
        if info is not None:
            self.writer.space()
            info.accept(self)

    def encode_ruleset(self, ruleset: Ruleset) -> None:
        if not ruleset.declarations:
            raise MissingDeclarationError()
        if not ruleset.selectors and self.config.require_selectors:
            raise MissingSelectorError()

        for idx, selector in enumerate(ruleset.selectors):
            if idx:
                self.writer.comma()
            self.encode_selector(selector)
        self.encode_block(ruleset.declarations)

    def encode_block(self, declarations: Iterable[Declaration]) -> None:
        """``{decl;decl}`` -- shared by rulesets and ``@font-face``."""
        self.writer.open_brace()
        for idx, declaration in enumerate(declarations):
            if idx:
                self.writer.semicolon()
            self.encode_declaration(declaration)
        self.writer.close_brace()

    # --- selectors --------------------------------------------------------------

    def encode_selector(self, selector: Selector) -> None:
        self.encode_simple(selector.simple)
        for combinator in selector.combinators:
            self.encode_combinator(combinator)

    def encode_combinator(self, combinator: Combinator) -> None:
        self.writer.text(combinator.combinator)
        self.encode_simple(combinator.simple)

    def encode_simple(self, simple: Simple) -> None:
        w = self.writer
        w.text(simple.element)
        for name in simple.classes:
            w.period()
            w.text(name)
        for attribute in simple.attributes:
            self.encode_attribute(attribute)
        for pseudo in simple.pseudo_elements:
            w.colon()
            w.colon()
            self.encode_pseudo(pseudo)
        for pseudo in simple.pseudo_classes:
            w.colon()
            self.encode_pseudo(pseudo)
        for negation in simple.negations:
            with self._nested():
                w.colon()
                w.text("not")
                w.open_paren()
                self.encode_simple(negation)
                w.close_paren()

    def encode_pseudo(self, pseudo: Pseudo) -> None:
        self.writer.text(pseudo.ident)
        if pseudo.func:
            self.writer.open_paren()
            self.writer.text(pseudo.func)
            self.writer.close_paren()

    def encode_attribute(self, attribute: Attribute) -> None:
        w = self.writer
        w.open_bracket()
        w.text(attribute.attr)
        w.text(attribute.operator)
        if attribute.value:
            w.double_quote()
            w.text(attribute.value)
            w.double_quote()
        if attribute.modifier:
            w.space()
            w.text(attribute.modifier)
        w.close_bracket()

    # --- declarations -----------------------------------------------------------

    def encode_declaration(self, declaration: Declaration) -> None:
        self.writer.text(declaration.property)
        self.writer.colon()
        for idx, value in enumerate(declaration.values):
            if idx:
                self.writer.comma()
            self.encode_value(value)

    def encode_value(self, value: Value) -> None:
        self.writer.text(" ".join(value.tokens))

    # --- at-rule information ----------------------------------------------------

    def encode_charset(self, info: CharsetInformation) -> None:
        self.writer.double_quote()
        self.writer.text(info.value)
        self.writer.double_quote()

    def encode_keyframes(self, info: KeyframesInformation) -> None:
        self.writer.text(info.value)

    def encode_media(self, info: MediaInformation) -> None:
        for idx, query in enumerate(info.queries):
            if idx:
                self.writer.comma()
            self.encode_query(query)

    def encode_query(self, query: Query) -> None:
        wrote = False
        if query.type is not None:
            self.encode_media_type(query.type)
            wrote = True
        for condition in query.conditions:
            if wrote:
                self.writer.space()
            self.encode_condition(condition)
            wrote = True

    def encode_media_type(self, media_type: MediaType) -> None:
        if media_type.operator:
            self.writer.text(media_type.operator)
            self.writer.space()
        self.writer.text(media_type.value)

    def encode_condition(self, condition: Condition) -> None:
        w = self.writer
        if condition.operator:
            w.text(condition.operator)
            w.space()
        w.open_paren()
        w.text(condition.feature)
        w.colon()
        w.text(condition.value)
        w.close_paren()

    def encode_font_face(self, info: FontFaceInformation) -> None:
        self.encode_block(info.declarations)


def encode_to(
    statements: Iterable[Statement],
    sink: Sink,
    config: EncoderConfig | None = None,
) -> int:
    """Encode *statements* into *sink*; return the number of bytes written.

    On error, bytes written before the failure stay in the sink.
    """
    writer = TokenWriter(sink)
    count = Encoder(writer, config).encode_statements(statements)
    logger.debug("Encoded %d statement(s), %d byte(s)", count, writer.written)
    return writer.written


def encode(statements: Iterable[Statement], config: EncoderConfig | None = None) -> bytes:
    """Encode *statements* to CSS bytes."""
    writer = TokenWriter()
    count = Encoder(writer, config).encode_statements(statements)
    logger.debug("Encoded %d statement(s), %d byte(s)", count, writer.written)
    return writer.getvalue()
