"""JSON payload <-> stylesheet tree.

The payload mirrors the model field for field::

    [
      {"atrule": {"ident": {"type": "charset", "info": {"value": "utf-8"}}}},
      {"ruleset": {
          "selectors": [{"simple": {"element": "p"}}],
          "declarations": [{"property": "color", "values": [{"values": ["red"]}]}]
      }}
    ]

Declarations also accept the single-group shorthand ``"value": ["1px", "solid"]``.
The ``info`` object of an at-rule is decoded into the variant the registry
holds for its ``type``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from typing import Any

from json2css.config import EncoderConfig
from json2css.errors import DecodeError, NestingTooDeepError, UnknownIdentifierTypeError
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

__all__ = ["decode_statements", "statements_to_json"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _object(data: Any, path: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"expected an object, got {type(data).__name__}", path)
    return data


def _list(data: Any, key: str, path: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"expected a list, got {type(value).__name__}", f"{path}.{key}")
    return value


def _text(data: dict[str, Any], key: str, path: str, required: bool = False) -> str:
    value = data.get(key)
    if value is None:
        if required:
            raise DecodeError("missing required field", f"{path}.{key}")
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"expected a string, got {type(value).__name__}", f"{path}.{key}")
    return value


def _texts(data: dict[str, Any], key: str, path: str) -> tuple[str, ...]:
    items = _list(data, key, path)
    for idx, item in enumerate(items):
        if not isinstance(item, str):
            raise DecodeError(
                f"expected a string, got {type(item).__name__}", f"{path}.{key}[{idx}]"
            )
    return tuple(items)


def _build(cls: type, path: str, **kwargs: Any) -> Any:
    """Construct a model node, reporting __post_init__ failures as DecodeError."""
    try:
        return cls(**kwargs)
    except ValueError as exc:
        raise DecodeError(str(exc), path, cause=exc) from exc


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class _Decoder:
    def __init__(self, config: EncoderConfig) -> None:
        self.config = config
        self._depth = 0

    def _enter(self) -> None:
        if self._depth >= self.config.max_depth:
            raise NestingTooDeepError(self.config.max_depth)
        self._depth += 1

    def _leave(self) -> None:
        self._depth -= 1

    def statements(self, data: Any, path: str) -> tuple[Statement, ...]:
        if not isinstance(data, list):
            raise DecodeError(f"expected a list, got {type(data).__name__}", path)
        return tuple(self.statement(item, f"{path}[{idx}]") for idx, item in enumerate(data))

    def statement(self, data: Any, path: str) -> Statement:
        data = _object(data, path)
        atrule = None
        ruleset = None
        if data.get("atrule") is not None:
            atrule = self.atrule(data["atrule"], f"{path}.atrule")
        if data.get("ruleset") is not None:
            ruleset = self.ruleset(data["ruleset"], f"{path}.ruleset")
        return _build(Statement, path, atrule=atrule, ruleset=ruleset)

    def atrule(self, data: Any, path: str) -> AtRule:
        data = _object(data, path)
        if "ident" not in data:
            raise DecodeError("missing required field", f"{path}.ident")
        identifier = self.identifier(data["ident"], f"{path}.ident")
        nested_data = _list(data, "nested", path)
        if not nested_data:
            return AtRule(identifier=identifier)
        self._enter()
        try:
            nested = tuple(
                self.statement(item, f"{path}.nested[{idx}]")
                for idx, item in enumerate(nested_data)
            )
        finally:
            self._leave()
        return AtRule(identifier=identifier, nested=nested)

    def identifier(self, data: Any, path: str) -> Identifier:
        data = _object(data, path)
        tag = _text(data, "type", path, required=True)
        variant = self.config.registry.lookup(tag)
        info_data = data.get("info")
        if info_data is None:
            return Identifier(type=tag)
        return Identifier(type=tag, information=self.information(variant, info_data, f"{path}.info"))

    def information(self, variant: type[Information], data: Any, path: str) -> Information:
        data = _object(data, path)
        if issubclass(variant, (CharsetInformation, KeyframesInformation)):
            return variant(value=_text(data, "value", path))
        if issubclass(variant, MediaInformation):
            queries = tuple(
                self.query(item, f"{path}.queries[{idx}]")
                for idx, item in enumerate(_list(data, "queries", path))
            )
            return variant(queries=queries)
        if issubclass(variant, FontFaceInformation):
            return variant(declarations=self.declarations(data, path))
        # Variants added through the registry take their fields by name.
        known = {f.name for f in fields(variant)} if is_dataclass(variant) else set()
        kwargs = {k: v for k, v in data.items() if k in known}
        try:
            return variant(**kwargs)
        except (TypeError, ValueError) as exc:
            raise DecodeError(str(exc), path, cause=exc) from exc

    def query(self, data: Any, path: str) -> Query:
        data = _object(data, path)
        media_type = None
        if data.get("type") is not None:
            type_data = _object(data["type"], f"{path}.type")
            media_type = MediaType(
                value=_text(type_data, "value", f"{path}.type", required=True),
                operator=_text(type_data, "operator", f"{path}.type"),
            )
        conditions = []
        for idx, item in enumerate(_list(data, "conditions", path)):
            cpath = f"{path}.conditions[{idx}]"
            item = _object(item, cpath)
            conditions.append(
                Condition(
                    feature=_text(item, "feature", cpath, required=True),
                    value=_text(item, "value", cpath),
                    operator=_text(item, "operator", cpath),
                )
            )
        return Query(type=media_type, conditions=tuple(conditions))

    def ruleset(self, data: Any, path: str) -> Ruleset:
        data = _object(data, path)
        selectors = tuple(
            self.selector(item, f"{path}.selectors[{idx}]")
            for idx, item in enumerate(_list(data, "selectors", path))
        )
        return Ruleset(selectors=selectors, declarations=self.declarations(data, path))

    def declarations(self, data: dict[str, Any], path: str) -> tuple[Declaration, ...]:
        return tuple(
            self.declaration(item, f"{path}.declarations[{idx}]")
            for idx, item in enumerate(_list(data, "declarations", path))
        )

    def declaration(self, data: Any, path: str) -> Declaration:
        data = _object(data, path)
        prop = _text(data, "property", path, required=True)
        if "values" in data:
            values = []
            for idx, item in enumerate(_list(data, "values", path)):
                vpath = f"{path}.values[{idx}]"
                values.append(Value(tokens=_texts(_object(item, vpath), "values", vpath)))
            return _build(Declaration, path, property=prop, values=tuple(values))
        tokens = _texts(data, "value", path)
        return _build(Declaration, path, property=prop, values=(Value(tokens=tokens),))

    def selector(self, data: Any, path: str) -> Selector:
        data = _object(data, path)
        simple = self.simple(data.get("simple", {}), f"{path}.simple")
        combinators = []
        for idx, item in enumerate(_list(data, "combinate", path)):
            cpath = f"{path}.combinate[{idx}]"
            item = _object(item, cpath)
            combinators.append(
                _build(
                    Combinator,
                    cpath,
                    combinator=_text(item, "combinator", cpath, required=True),
                    simple=self.simple(item.get("simple", {}), f"{cpath}.simple"),
                )
            )
        return Selector(simple=simple, combinators=tuple(combinators))

    def simple(self, data: Any, path: str) -> Simple:
        data = _object(data, path)
        attributes = []
        for idx, item in enumerate(_list(data, "attributes", path)):
            apath = f"{path}.attributes[{idx}]"
            item = _object(item, apath)
            attributes.append(
                Attribute(
                    attr=_text(item, "attr", apath, required=True),
                    operator=_text(item, "operator", apath),
                    value=_text(item, "value", apath),
                    modifier=_text(item, "modifier", apath),
                )
            )
        negations_data = _list(data, "negations", path)
        negations: tuple[Simple, ...] = ()
        if negations_data:
            self._enter()
            try:
                negations = tuple(
                    self.simple(item, f"{path}.negations[{idx}]")
                    for idx, item in enumerate(negations_data)
                )
            finally:
                self._leave()
        return Simple(
            element=_text(data, "element", path),
            classes=_texts(data, "classes", path),
            attributes=tuple(attributes),
            pseudo_elements=self.pseudos(data, "pseudo_elements", path),
            pseudo_classes=self.pseudos(data, "pseudo_classes", path),
            negations=negations,
        )

    def pseudos(self, data: dict[str, Any], key: str, path: str) -> tuple[Pseudo, ...]:
        pseudos = []
        for idx, item in enumerate(_list(data, key, path)):
            ppath = f"{path}.{key}[{idx}]"
            item = _object(item, ppath)
            pseudos.append(
                Pseudo(ident=_text(item, "ident", ppath, required=True), func=_text(item, "func", ppath))
            )
        return tuple(pseudos)


def decode_statements(
    payload: Any,
    config: EncoderConfig | None = None,
) -> tuple[Statement, ...]:
    """Decode a JSON statement list into model statements.

    *payload* may be already-parsed JSON (a list) or JSON text.

    Raises:
        DecodeError: The payload is malformed.
        UnknownIdentifierTypeError: An at-rule type is not registered.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise DecodeError(f"invalid JSON: {exc}", cause=exc) from exc
        except RecursionError as exc:
            raise DecodeError("JSON nested too deeply", cause=exc) from exc
    statements = _Decoder(config or EncoderConfig()).statements(payload, "$")
    logger.debug("Decoded %d statement(s)", len(statements))
    return statements


# ---------------------------------------------------------------------------
# Marshaling
# ---------------------------------------------------------------------------


def _put(out: dict[str, Any], key: str, value: Any) -> None:
    if value:
        out[key] = value


def _simple_json(simple: Simple) -> dict[str, Any]:
    out: dict[str, Any] = {}
    _put(out, "element", simple.element)
    _put(out, "classes", list(simple.classes))
    _put(out, "attributes", [_attribute_json(a) for a in simple.attributes])
    _put(out, "pseudo_elements", [_pseudo_json(p) for p in simple.pseudo_elements])
    _put(out, "pseudo_classes", [_pseudo_json(p) for p in simple.pseudo_classes])
    _put(out, "negations", [_simple_json(s) for s in simple.negations])
    return out


def _attribute_json(attribute: Attribute) -> dict[str, Any]:
    out: dict[str, Any] = {"attr": attribute.attr}
    _put(out, "operator", attribute.operator)
    _put(out, "value", attribute.value)
    _put(out, "modifier", attribute.modifier)
    return out


def _pseudo_json(pseudo: Pseudo) -> dict[str, Any]:
    out: dict[str, Any] = {"ident": pseudo.ident}
    _put(out, "func", pseudo.func)
    return out


def _selector_json(selector: Selector) -> dict[str, Any]:
    out: dict[str, Any] = {"simple": _simple_json(selector.simple)}
    _put(
        out,
        "combinate",
        [{"combinator": c.combinator, "simple": _simple_json(c.simple)} for c in selector.combinators],
    )
    return out


def _declaration_json(declaration: Declaration) -> dict[str, Any]:
    return {
        "property": declaration.property,
        "values": [{"values": list(v.tokens)} for v in declaration.values],
    }


def _query_json(query: Query) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if query.type is not None:
        media_type: dict[str, Any] = {"value": query.type.value}
        _put(media_type, "operator", query.type.operator)
        out["type"] = media_type
    conditions = []
    for c in query.conditions:
        condition: dict[str, Any] = {"feature": c.feature, "value": c.value}
        _put(condition, "operator", c.operator)
        conditions.append(condition)
    _put(out, "conditions", conditions)
    return out


def _information_json(info: Information) -> dict[str, Any]:
    if isinstance(info, (CharsetInformation, KeyframesInformation)):
        return {"value": info.value}
    if isinstance(info, MediaInformation):
        return {"queries": [_query_json(q) for q in info.queries]}
    if isinstance(info, FontFaceInformation):
        return {"declarations": [_declaration_json(d) for d in info.declarations]}
    if is_dataclass(info):
        return {f.name: getattr(info, f.name) for f in fields(info)}
    raise UnknownIdentifierTypeError(info.tag)


def _statement_json(statement: Statement) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if statement.atrule is not None:
        ident: dict[str, Any] = {"type": statement.atrule.identifier.type}
        if statement.atrule.identifier.information is not None:
            ident["info"] = _information_json(statement.atrule.identifier.information)
        atrule: dict[str, Any] = {"ident": ident}
        _put(atrule, "nested", [_statement_json(s) for s in statement.atrule.nested])
        out["atrule"] = atrule
    if statement.ruleset is not None:
        out["ruleset"] = {
            "selectors": [_selector_json(s) for s in statement.ruleset.selectors],
            "declarations": [_declaration_json(d) for d in statement.ruleset.declarations],
        }
    return out


def statements_to_json(statements: tuple[Statement, ...] | list[Statement]) -> list[dict[str, Any]]:
    """Convert model statements into a JSON-compatible list."""
    return [_statement_json(s) for s in statements]
