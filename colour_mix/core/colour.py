"""Colour parsing and serialisation.

Recognises hex colours and CSS functional notation (rgb, rgba, hsl, hsla,
hwb, lab, lch, oklab, oklch), in both comma and space syntax. Arguments are
split at the top level only, so components may be arbitrary expressions such
as calc(...) or var(...). Named colours and keywords are not recognised.

Nothing in here raises on bad input: an unrecognised colour is None.
"""

import re

from PIL import ImageColor

from colour_mix.core.types import Component, CSSColor

RGB_TYPES = ('rgb', 'rgba')

_HEX_RE = re.compile(r'^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$', re.IGNORECASE)
_FUNCTION_RE = re.compile(r'^(rgba?|hsla?|hwb|lab|lch|oklab|oklch)\((.*)\)$', re.IGNORECASE | re.DOTALL)


def parse_css_color(text: str) -> CSSColor | None:
    """Parse a colour string. Returns None for anything that is not a colour."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not text:
        return None
    if text.startswith('#'):
        return _parse_hex(text)
    m = _FUNCTION_RE.match(text)
    if m:
        return _parse_function(m.group(1).lower(), m.group(2))
    return None


def parse_rgb_color(colour: str | CSSColor) -> CSSColor | None:
    """Parse (if needed) and keep the colour only when it is rgb/rgba."""
    parsed = parse_css_color(colour) if isinstance(colour, str) else colour
    if parsed is None or parsed.type not in RGB_TYPES:
        return None
    return parsed


def colour_to_string(colour: CSSColor) -> str:
    """Serialise a colour back to CSS text."""
    kind = colour.type.lower()
    parts = [format_value(c) for c in colour.components]
    if kind in ('rgba', 'hsla'):
        alpha = '' if colour.alpha is None else f', {format_value(colour.alpha)}'
        return f'{kind}({", ".join(parts)}{alpha})'
    alpha = '' if colour.alpha is None else f' / {format_value(colour.alpha)}'
    return f'{kind}({" ".join(parts)}{alpha})'


def format_value(value: Component) -> str:
    """Render a component: 255.0 -> '255', -0.0 -> '0', text unchanged."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_hex(text: str) -> CSSColor | None:
    if not _HEX_RE.match(text):
        return None
    try:
        channels = ImageColor.getrgb(text)
    except ValueError:
        return None
    alpha = round(channels[3] / 255, 2) if len(channels) == 4 else None
    return CSSColor(type='rgb', components=(channels[0], channels[1], channels[2]), alpha=alpha)


def _parse_function(kind: str, body: str) -> CSSColor | None:
    commas = _split_top_level(body, ',')
    if commas is None:
        return None

    if len(commas) > 1:
        args = [a.strip() for a in commas]
        if any(not a for a in args) or len(args) not in (3, 4):
            return None
        alpha = args[3] if len(args) == 4 else None
        return CSSColor(type=kind, components=(args[0], args[1], args[2]), alpha=alpha)

    # Space syntax: "r g b" or "r g b / a"
    halves = _split_top_level(body, '/')
    if halves is None or len(halves) > 2:
        return None
    components = _split_top_level(halves[0], ' ')
    if components is None or len(components) != 3:
        return None
    alpha = None
    if len(halves) == 2:
        alpha = halves[1].strip()
        if not alpha or _split_top_level(alpha, ' ') != [alpha]:
            return None
    return CSSColor(type=kind, components=(components[0], components[1], components[2]), alpha=alpha)


def _split_top_level(text: str, sep: str) -> list[str] | None:
    """Split on sep outside parentheses. Whitespace sep matches any whitespace.

    Returns None when the parentheses are unbalanced.
    """
    parts = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth -= 1
            if depth < 0:
                return None
        elif depth == 0 and (ch == sep or (sep == ' ' and ch.isspace())):
            parts.append(text[start:i])
            start = i + 1
    if depth != 0:
        return None
    parts.append(text[start:])
    if sep == ' ':
        parts = [p for p in parts if p]
    return parts
