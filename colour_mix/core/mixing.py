"""Colour mixing as symbolic calc() arithmetic.

Components are never evaluated here: they may be var() references resolved by
the browser, so each mixed channel is emitted as

    calc(v2 + (v1 - v2) * w / 100)

Weight 0 gives color2 back, weight 100 gives color1. Weights are not clamped.
See https://sass-lang.com/documentation/modules/color#mix
"""

import math
import re

from colour_mix.core.colour import format_value, parse_rgb_color
from colour_mix.core.types import Component, CSSColor

WHITE = '#fff'
BLACK = '#000'

_LEADING_NUMBER_RE = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)')


def mix_component(v1: Component, v2: Component, w: Component) -> str:
    a, b, weight = format_value(v1), format_value(v2), format_value(w)
    return f'calc({b} + ({a} - {b}) * {weight} / 100)'


def mix_colour(colour1: str | CSSColor, colour2: str | CSSColor, weight: Component) -> CSSColor | None:
    """Mix colour1 into colour2. Both must be rgb/rgba, otherwise None.

    A missing alpha counts as 1, and the result always carries a mixed alpha.
    """
    c1 = parse_rgb_color(colour1)
    c2 = parse_rgb_color(colour2)
    if c1 is None or c2 is None:
        return None

    components = tuple(mix_component(c1.components[i], c2.components[i], weight) for i in range(3))
    alpha = mix_component(
        1 if c1.alpha is None else c1.alpha,
        1 if c2.alpha is None else c2.alpha,
        weight,
    )
    return CSSColor(type='rgb', components=components, alpha=alpha)


def tint(colour: str | CSSColor, weight: Component) -> CSSColor | None:
    """Mix with white."""
    return mix_colour(WHITE, colour, weight)


def shade(colour: str | CSSColor, weight: Component) -> CSSColor | None:
    """Mix with black."""
    return mix_colour(BLACK, colour, weight)


def shift(colour: str | CSSColor, weight: Component) -> CSSColor | None:
    """Shade for a positive weight, tint by the magnitude otherwise (0 tints by 0)."""
    num = parse_number(weight)
    if num is None:
        return None
    if num > 0:
        return shade(colour, weight)
    return tint(colour, -num)


def parse_number(value: Component) -> float | None:
    """Leading-number parse: '30' -> 30.0, '30px' -> 30.0, 'abc' -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    m = _LEADING_NUMBER_RE.match(str(value))
    return float(m.group(1)) if m else None


MIXERS = {'tint': tint, 'shade': shade, 'shift': shift}
