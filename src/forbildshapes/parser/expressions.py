"""
Expression Evaluator
====================
Turns the value part of a descriptor clause into numbers, vectors and planes.

Three entry points share one LALR grammar (see ``grammar.py``):

* ``evaluate_scalar("2*sqrt(2)")`` -> ``2.828...``
* ``evaluate_vector("(1, 0, -pi)")`` -> ``Vector(1.0, 0.0, -3.14...)``
* ``evaluate_plane("r(1, 0, 0) < 2")`` -> ``Plane`` in world space

Plane clauses ``r(n) < v`` and ``r(n) > v`` always use the written vector
``n`` (normalised) as the outward normal of the kept half-space. The anchor is
``v * n`` for ``<`` and ``-v * n`` for ``>``, so ``r(1,0,0) < 2`` keeps
``x <= 2`` and ``r(-1,0,0) > 2`` keeps ``x >= 2``.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Tuple

from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError, VisitError

from forbildshapes.errors import EvaluationError
from forbildshapes.model.geometry_primitives import Plane, Point, Vector
from forbildshapes.parser.grammar import EXPRESSION_GRAMMAR

logger = logging.getLogger(__name__)

CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}

# name -> (callable, number of arguments)
FUNCTIONS: Dict[str, Tuple[Callable[..., float], int]] = {
    "sqrt": (math.sqrt, 1),
    "sin": (math.sin, 1),
    "cos": (math.cos, 1),
    "tan": (math.tan, 1),
    "asin": (math.asin, 1),
    "acos": (math.acos, 1),
    "atan": (math.atan, 1),
    "atan2": (math.atan2, 2),
    "abs": (abs, 1),
    "exp": (math.exp, 1),
    "log": (math.log, 1),
    "min": (min, 2),
    "max": (max, 2),
}

_PARSER = Lark(
    EXPRESSION_GRAMMAR,
    parser="lalr",
    start=["scalar", "vector", "plane"],
)


@v_args(inline=True)
class ExpressionTransformer(Transformer):
    """Folds a parse tree bottom-up into plain Python values."""

    def scalar(self, value):
        return value

    def number(self, token):
        return float(token)

    def symbol(self, token):
        name = str(token).lower()
        if name not in CONSTANTS:
            raise EvaluationError(f"Unknown symbol '{token}'.")
        return CONSTANTS[name]

    def call(self, token, arguments):
        name = str(token).lower()
        if name not in FUNCTIONS:
            raise EvaluationError(f"Unknown function '{token}'.")
        func, arity = FUNCTIONS[name]
        if len(arguments) != arity:
            raise EvaluationError(
                f"Function '{name}' expects {arity} argument(s), got {len(arguments)}."
            )
        return float(func(*arguments))

    def arguments(self, *items):
        return list(items)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a / b

    def pow(self, a, b):
        return float(a ** b)

    def neg(self, a):
        return -a

    def vector(self, x, y, z):
        return Vector(x, y, z)

    def plane(self, normal, comparator, value):
        return normal, str(comparator), value


def _evaluate(text: str, start: str):
    source = text.strip()
    if not source:
        raise EvaluationError(f"Empty {start} expression.")
    try:
        tree = _PARSER.parse(source, start=start)
        return ExpressionTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, EvaluationError):
            raise e.orig_exc from None
        raise EvaluationError(f"Cannot evaluate {start} '{source}': {e.orig_exc}") from e.orig_exc
    except LarkError as e:
        raise EvaluationError(f"Malformed {start} expression '{source}'.") from e


def _finite(value: float, source: str) -> float:
    if isinstance(value, complex) or not math.isfinite(value):
        raise EvaluationError(f"Expression '{source}' does not evaluate to a finite number.")
    return float(value)


def evaluate_scalar(text: str) -> float:
    """
    Evaluate an arithmetic expression.

    Args:
        text: e.g. ``"5"``, ``"-2.5e-1"``, ``"sqrt(2)/2"``, ``"2*pi"``.

    Returns:
        The value as a float.

    Raises:
        EvaluationError: on syntax errors, unknown names or invalid math.
    """
    value = _evaluate(text, "scalar")
    return _finite(value, text)


def evaluate_vector(text: str) -> Vector:
    """Evaluate a parenthesised 3-vector literal such as ``"(1, 0, sqrt(3))"``."""
    vector = _evaluate(text, "vector")
    for component in vector.to_tuple():
        _finite(component, text)
    return vector


def evaluate_plane(text: str) -> Plane:
    """
    Evaluate a plane clause ``r(nx, ny, nz) <op> value`` into a world-space plane.

    ``<=`` and ``>=`` are accepted as spellings of ``<`` and ``>``.
    """
    normal, comparator, value = _evaluate(text, "plane")
    value = _finite(value, text)
    for component in normal.to_tuple():
        _finite(component, text)
    if normal.is_zero:
        raise EvaluationError(f"Plane clause '{text.strip()}' has a zero normal.")

    unit = normal.normalize()
    if comparator.startswith("<"):
        anchor = Point() + unit * value
    else:
        anchor = Point() + unit * (-value)
    plane = Plane(anchor=anchor, normal=unit)
    logger.debug(f"Plane clause '{text.strip()}' -> anchor {anchor.to_tuple()}, normal {unit.to_tuple()}")
    return plane
