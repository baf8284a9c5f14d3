"""Shared types for colour-mix: CSSColor, MixOperation, MatchResult, VariantRule, RewriteReport."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Component = int | float | str
PropertyEntry = tuple[str, Any]

DEFAULT_SEPARATORS = (':', '-')


@dataclass(frozen=True)
class CSSColor:
    """A parsed colour. Components may be numbers or expression text (calc, var)."""

    type: str
    components: tuple[Component, Component, Component]
    alpha: Component | None = None


@dataclass(frozen=True)
class MixOperation:
    """One of tint/shade/shift with its weight, kept as text for the calc() output."""

    mode: str
    weight: str


@dataclass
class MatchResult:
    """What a variant returns when it recognises a token prefix."""

    consumed: int  # prefix length, separator included
    operation: MixOperation
    matcher: str  # unconsumed token suffix
    rewrite: Callable[[list[PropertyEntry]], list[PropertyEntry]]


@dataclass(frozen=True)
class GeneratorConfig:
    """Generator settings a variant may depend on."""

    separators: tuple[str, ...] = DEFAULT_SEPARATORS

    def __post_init__(self) -> None:
        if not self.separators:
            raise ValueError('GeneratorConfig needs at least one separator')
        if any(not s for s in self.separators):
            raise ValueError(f'Empty separator in {self.separators!r}')


@dataclass
class VariantContext:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)


class VariantRule:
    """A self-registering variant rule.

    Usage in a variant module:

        variant = VariantRule(name='mix', help='Mix colours with white or black')

        @variant.matcher
        def match(token, ctx):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._match_fn: Callable | None = None
        self.cache: dict[Any, Any] = {}  # per-instance, e.g. compiled patterns

    def matcher(self, fn: Callable) -> Callable:
        """Decorator to register the match function."""
        self._match_fn = fn
        return fn

    def match(self, token: str, ctx: VariantContext) -> MatchResult | None:
        """Try the registered match function against a token."""
        if self._match_fn is None:
            raise RuntimeError(f'Variant {self.name} has no match function')
        return self._match_fn(token, ctx)


@dataclass
class RewriteReport:
    """Accumulates one token's rewrite for text/JSON output."""

    token: str
    variant: str | None = None
    mode: str | None = None
    weight: str | None = None
    remainder: str | None = None
    entries: list[dict[str, Any]] = field(default_factory=list)
    changed_count: int = 0
    skipped_count: int = 0

    def add(self, prop: str, before: Any, after: Any, preview: str | None = None) -> None:
        """Record one declaration before and after the rewrite."""
        changed = before != after
        self.entries.append(
            {
                'property': prop,
                'before': before,
                'after': after,
                'changed': changed,
                'preview': preview,
            }
        )
        if changed:
            self.changed_count += 1
        else:
            self.skipped_count += 1
