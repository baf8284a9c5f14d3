"""Variant registry.

Built-in rules are the `variant` objects of the modules in
colour_mix/variants/. Host code can add its own rules with register().
Dispatch order is by name; the first rule that matches a token wins.
"""

import importlib
import pkgutil

from colour_mix.core.types import MatchResult, VariantContext, VariantRule

_registry: dict[str, VariantRule] = {}


def _load_builtin() -> None:
    import colour_mix.variants as pkg

    for info in pkgutil.iter_modules(pkg.__path__):
        if info.name.startswith('_'):
            continue
        rule = getattr(importlib.import_module(f'{pkg.__name__}.{info.name}'), 'variant', None)
        if isinstance(rule, VariantRule):
            _registry.setdefault(rule.name, rule)


def discover() -> dict[str, VariantRule]:
    """Return every known rule, loading the built-in ones on first use."""
    if not _registry:
        _load_builtin()
    return _registry


def register(rule: VariantRule) -> VariantRule:
    """Add a rule. A name already taken is a ValueError."""
    reg = discover()
    if rule.name in reg and reg[rule.name] is not rule:
        raise ValueError(f'Variant {rule.name!r} is already registered')
    reg[rule.name] = rule
    return rule


def get(name: str) -> VariantRule:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown variant: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_variants() -> dict[str, VariantRule]:
    return discover()


def match_first(token: str, ctx: VariantContext) -> tuple[VariantRule, MatchResult] | None:
    """Try each rule in name order; return the first that matches the token."""
    for name in sorted(discover()):
        rule = _registry[name]
        result = rule.match(token, ctx)
        if result is not None:
            return rule, result
    return None
