import math

import pytest

from forbildshapes.errors import EvaluationError
from forbildshapes.parser.expressions import evaluate_plane, evaluate_scalar, evaluate_vector


def test_scalar_literals_and_arithmetic():
    assert evaluate_scalar("5") == 5.0
    assert evaluate_scalar(" 2.5 ") == 2.5
    assert math.isclose(evaluate_scalar("1e-3"), 0.001)
    assert evaluate_scalar("2*sqrt(4) + 1") == 5.0
    assert evaluate_scalar("(1 + 2) * 3") == 9.0
    assert evaluate_scalar("7 - 2 - 1") == 4.0
    assert evaluate_scalar("8 / 4 / 2") == 1.0


def test_power_binds_tighter_than_unary_minus():
    assert evaluate_scalar("-2^2") == -4.0
    assert evaluate_scalar("2^3^2") == 512.0
    assert math.isclose(evaluate_scalar("4^-1"), 0.25)


def test_constants_and_functions():
    assert math.isclose(evaluate_scalar("pi/2"), math.pi / 2)
    assert math.isclose(evaluate_scalar("atan2(1, 1)"), math.pi / 4)
    assert math.isclose(evaluate_scalar("cos(0) + abs(-2)"), 3.0)
    assert evaluate_scalar("max(1, 3) - min(1, 3)") == 2.0


@pytest.mark.parametrize(
    "text",
    ["foo", "bar(1)", "sqrt(1, 2)", "1/0", "", "2 +", "sqrt(-1)", "1 2", "(1, 2, 3)"],
)
def test_scalar_errors(text):
    with pytest.raises(EvaluationError):
        evaluate_scalar(text)


def test_vector_literal():
    v = evaluate_vector("(1, 0, -pi)")
    assert v.x == 1.0
    assert v.y == 0.0
    assert math.isclose(v.z, -math.pi)

    nested = evaluate_vector("((1+1), sqrt(9), 2*(0.5))")
    assert nested.to_tuple() == (2.0, 3.0, 1.0)


@pytest.mark.parametrize("text", ["1, 2, 3", "(1, 2)", "(1, 2, 3, 4)", "(a, 0, 0)"])
def test_vector_errors(text):
    with pytest.raises(EvaluationError):
        evaluate_vector(text)


def test_plane_less_than_keeps_side_against_normal():
    plane = evaluate_plane("r(1, 0, 0) < 2")
    assert plane.normal.to_tuple() == (1.0, 0.0, 0.0)
    assert plane.anchor.to_tuple() == (2.0, 0.0, 0.0)


def test_plane_greater_than_anchor_along_negated_normal():
    plane = evaluate_plane("r(-1, 0, 0) > 1")
    assert plane.normal.to_tuple() == (-1.0, 0.0, 0.0)
    assert plane.anchor.to_tuple() == (1.0, 0.0, 0.0)


def test_plane_normal_is_normalised_and_non_strict_operators_accepted():
    plane = evaluate_plane("r(0, 0, 2) <= 3")
    assert plane.normal.to_tuple() == (0.0, 0.0, 1.0)
    assert plane.anchor.to_tuple() == (0.0, 0.0, 3.0)

    diagonal = evaluate_plane("r(1, 1, 0) >= sqrt(2)")
    assert math.isclose(diagonal.normal.magnitude, 1.0)
    assert math.isclose(diagonal.anchor.x, -1.0)
    assert math.isclose(diagonal.anchor.y, -1.0)


@pytest.mark.parametrize(
    "text",
    ["r(0, 0, 0) < 1", "r > 3", "r(1, 0, 0) = 2", "q(1, 0, 0) < 1", "r(1e309, 0, 0) < 1", "r(0, 1, 0) < 1e309"],
)
def test_plane_errors(text):
    with pytest.raises(EvaluationError):
        evaluate_plane(text)
