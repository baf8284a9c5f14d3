"""Numeric preview of mixed colours.

Mixed channels are calc() text. When every operand is a plain number the
expression can be evaluated here to show what the browser would render.
Anything symbolic (var(), units) has no preview.
"""

import ast
import math
import operator

import numpy as np

from colour_mix.core.colour import RGB_TYPES
from colour_mix.core.types import Component, CSSColor

_BINARY_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
}
_UNARY_OPS = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


def evaluate(value: Component) -> float | None:
    """Evaluate a number or a (nested) calc() expression. None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip().replace('calc(', '(')
    try:
        tree = ast.parse(text, mode='eval')
        return float(_eval_node(tree.body))
    except (SyntaxError, ValueError, ZeroDivisionError):
        return None


def _eval_node(node: ast.AST) -> float:
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
        return node.value
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPS:
        return _BINARY_OPS[type(node.op)](_eval_node(node.left), _eval_node(node.right))
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        return _UNARY_OPS[type(node.op)](_eval_node(node.operand))
    raise ValueError(f'Not a numeric expression: {ast.dump(node)}')


def resolve_rgb(colour: CSSColor) -> tuple[int, int, int, float] | None:
    """Evaluate an rgb/rgba colour to clamped (r, g, b, alpha)."""
    if colour.type not in RGB_TYPES:
        return None
    channels = [evaluate(c) for c in colour.components]
    alpha = 1.0 if colour.alpha is None else evaluate(colour.alpha)
    values = [*channels, alpha]
    if any(v is None or not math.isfinite(v) for v in values):
        return None
    r, g, b = (int(round(min(max(c, 0.0), 255.0))) for c in channels)
    return (r, g, b, round(min(max(alpha, 0.0), 1.0), 3))


def to_hex(rgb: tuple[int, ...]) -> str:
    return f'#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}'


def rgb_distance(a: tuple[int, ...], b: tuple[int, ...]) -> float:
    """Euclidean RGB distance. Cast to int first so (0 - 200) cannot wrap."""
    va = np.array(a[:3], dtype=int)
    vb = np.array(b[:3], dtype=int)
    return float(np.linalg.norm(va - vb))
