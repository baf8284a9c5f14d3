"""Mix colours in generated declarations with white or black.

Token shape: mix-<mode>-<weight><separator>

  mode       tint (mix with white), shade (mix with black), or shift
             (shade for a positive weight, tint otherwise)
  weight     integer -999..999, percent of white/black mixed in
  separator  any configured separator, e.g. ':' or '-'

Every declaration value that parses as an rgb/rgba colour is replaced by a
calc() mix; anything else (theme tokens, named colours, hsl, lengths) is left
as it was. Weights outside 0..100 extrapolate.

Example:
    colour-mix apply mix-shade-30-bg-blue 'background-color:#336699'
    colour-mix apply mix-shift--20: 'color:rgb(51 102 153)'
"""

import re

from colour_mix.core.colour import colour_to_string, parse_css_color
from colour_mix.core.mixing import MIXERS
from colour_mix.core.types import MatchResult, MixOperation, PropertyEntry, VariantContext, VariantRule

MODES = ('tint', 'shade', 'shift')


def build_pattern(separators: tuple[str, ...]) -> re.Pattern:
    alternatives = '|'.join(re.escape(s) for s in separators)
    return re.compile(rf'^mix-({"|".join(MODES)})-(-?[0-9]{{1,3}})(?:{alternatives})')


def rewrite_entries(entries: list[PropertyEntry], operation: MixOperation) -> list[PropertyEntry]:
    """Mix every colour-valued entry. Order and length are preserved."""
    result = []
    for prop, value in entries:
        if isinstance(value, str) and value:
            colour = parse_css_color(value)
            if colour is not None:
                mixed = MIXERS[operation.mode](colour, operation.weight)
                if mixed is not None:
                    value = colour_to_string(mixed)
        result.append((prop, value))
    return result


def variant_colour_mix() -> VariantRule:
    """Build a mix rule with its own pattern cache (one pattern per separator set)."""
    rule = VariantRule(
        name='mix',
        help='Tint, shade or shift colour values with white/black: mix-<mode>-<weight>',
    )
    patterns: dict[tuple[str, ...], re.Pattern] = rule.cache

    @rule.matcher
    def match(token: str, ctx: VariantContext) -> MatchResult | None:
        separators = tuple(ctx.config.separators)
        pattern = patterns.get(separators)
        if pattern is None:
            pattern = patterns[separators] = build_pattern(separators)

        m = pattern.match(token)
        if m is None:
            return None

        operation = MixOperation(mode=m.group(1), weight=m.group(2))
        return MatchResult(
            consumed=len(m.group(0)),
            operation=operation,
            matcher=token[len(m.group(0)) :],
            rewrite=lambda entries: rewrite_entries(entries, operation),
        )

    return rule


variant = variant_colour_mix()
