from __future__ import annotations

from dataclasses import dataclass, field

from json2css.registry import AtRuleRegistry


@dataclass(frozen=True)
class EncoderConfig:
    registry: AtRuleRegistry = field(default_factory=AtRuleRegistry.default)
    require_selectors: bool = False  # raise MissingSelectorError on empty selector lists
    max_depth: int = 64  # negation and at-rule nesting limit

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
