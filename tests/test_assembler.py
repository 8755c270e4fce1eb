import math

import numpy as np
import pytest

from forbildshapes import (
    AmbiguousFrameError,
    DegenerateTransformError,
    EvaluationError,
    ForbildError,
    MalformedDescriptorError,
    PrimitiveKind,
    compile_cylinder,
)
from forbildshapes.model.geometry_primitives import Point, Vector


def test_plain_cylinder():
    prim = compile_cylinder("Cylinder: x=0;y=0;z=0;r=5;l=10;axis(0,0,1)")
    assert prim.kind == PrimitiveKind.CYLINDER
    assert (prim.dx, prim.dy, prim.dz) == (5.0, 5.0, 10.0)
    assert prim.origin == Point(0.0, 0.0, 0.0)
    assert prim.axis == Vector(0.0, 0.0, 1.0)
    assert prim.bounds == ()
    np.testing.assert_array_equal(prim.transform.linear, np.eye(3))


def test_axis_bound_becomes_local_plane():
    prim = compile_cylinder("Cylinder: x=1;y=2;z=3;dx=4;dy=5;l=6;x>1")
    assert prim.origin == Point(1.0, 2.0, 3.0)
    assert (prim.dx, prim.dy, prim.dz) == (4.0, 5.0, 6.0)
    assert len(prim.bounds) == 1

    world = prim.attributes.bounding_planes[0]
    assert world.normal.to_tuple() == (-1.0, 0.0, 0.0)
    assert world.anchor.to_tuple() == (1.0, 0.0, 0.0)

    local = prim.bounds[0].plane
    assert local.normal.to_tuple() == (-1.0, 0.0, 0.0)
    assert local.anchor.to_tuple() == (0.0, -2.0, -3.0)

    back = prim.world_bounding_planes()[0]
    assert back.normal.to_tuple() == (-1.0, 0.0, 0.0)
    assert back.anchor.to_tuple() == (1.0, 0.0, 0.0)


def test_type_suffix_sets_axis():
    prim = compile_cylinder("Cylinder_x: r=3;l=1")
    assert prim.axis.to_tuple() == (1.0, 0.0, 0.0)
    assert (prim.dx, prim.dy, prim.dz) == (3.0, 3.0, 1.0)
    np.testing.assert_allclose(
        prim.transform.apply_vector(Vector(0, 0, 1)).to_array(), [1.0, 0.0, 0.0], atol=1e-12
    )


def test_both_frame_vectors_raise():
    with pytest.raises(AmbiguousFrameError):
        compile_cylinder("Cylinder: r=1; l=1; a_x(1,0,0); a_y(0,1,0)")


def test_axis_clause_overrides_type_suffix():
    prim = compile_cylinder("Cylinder_x: r=1; l=1; axis(0, 1, 0)")
    assert prim.axis == Vector(0.0, 1.0, 0.0)


def test_elliptic_kind_from_type_name():
    prim = compile_cylinder("Ellipt_Cyl_z: dx=2; dy=1; l=3")
    assert prim.kind == PrimitiveKind.ELLIPTIC_CYLINDER
    assert (prim.dx, prim.dy) == (2.0, 1.0)


@pytest.mark.parametrize(
    "descriptor, error",
    [
        ("Cylinder r=1", MalformedDescriptorError),
        ("Cylinder:", MalformedDescriptorError),
        ("Cylinder: r=1; axis(0, 0, 0)", DegenerateTransformError),
        ("Cylinder: r=1; a_x(0, 0, 1)", DegenerateTransformError),
        ("Cylinder: r=sqrt(", EvaluationError),
        ("Cylinder: r=1; x<unknown", EvaluationError),
        ("Cylinder: r=1; l=1; r(1e309, 0, 0) < 1", EvaluationError),
        ("Cylinder: r=1; l=1; axis(1e309, 0, 0)", EvaluationError),
    ],
)
def test_compile_errors(descriptor, error):
    with pytest.raises(error):
        compile_cylinder(descriptor)


def test_every_failure_is_a_forbild_error():
    with pytest.raises(ForbildError):
        compile_cylinder("nonsense")
    with pytest.raises(ValueError):
        compile_cylinder("Cylinder: r=1; colour=red", strict=True)


@pytest.mark.parametrize(
    "clause, inside, outside",
    [
        ("x>1", (1.5, 0.0, 0.0), (0.5, 0.0, 0.0)),
        ("x<1", (0.5, 0.0, 0.0), (1.5, 0.0, 0.0)),
        ("y>-1", (0.0, -0.5, 0.0), (0.0, -1.5, 0.0)),
        ("z<=2", (0.0, 0.0, 1.5), (0.0, 0.0, 2.5)),
        ("r(1, 1, 0) < 1", (0.0, 0.0, 0.0), (1.0, 1.0, 0.0)),
        ("r(0, 1, 1) > 0", (0.0, -1.0, 0.0), (0.0, 1.0, 0.0)),
    ],
)
def test_bound_sign_survives_rotation(clause, inside, outside):
    prim = compile_cylinder(f"Cylinder: x=0.2; r=10; l=10; axis(1, 2, 3); {clause}")
    world = prim.attributes.bounding_planes[0]
    back = prim.world_bounding_planes()[0]

    np.testing.assert_allclose(back.normal.to_array(), world.normal.to_array(), atol=1e-12)
    assert math.isclose(back.signed_distance(world.anchor), 0.0, abs_tol=1e-12)

    assert prim.contains(inside)
    assert not prim.contains(outside)


def test_copy_is_equal_and_shares_nothing():
    prim = compile_cylinder("Cylinder: x=1; r=2; l=3; a_y(0, 1, 0); x>0; r(0,1,1)<2")
    clone = prim.copy()

    assert clone == prim
    assert clone.attributes is not prim.attributes
    assert clone.attributes.origin is not prim.attributes.origin
    assert clone.extents is not prim.extents
    assert clone.transform is not prim.transform
    assert clone.transform.linear is not prim.transform.linear
    assert all(a is not b for a, b in zip(clone.bounds, prim.bounds))
    assert all(a.plane is not b.plane for a, b in zip(clone.bounds, prim.bounds))


def test_compile_is_deterministic():
    text = "Cylinder_y: x=1; r=2; l=3; r(1,2,3) < 1; z>-1"
    assert compile_cylinder(text) == compile_cylinder(text)


def test_to_dict_is_json_ready():
    data = compile_cylinder("Cylinder_x: r=3; l=1; y<2").to_dict()
    assert data["kind"] == "cylinder"
    assert data["axis"] == [1.0, 0.0, 0.0]
    assert data["dx"] == 3.0
    assert len(data["bounds"]) == 1
    assert len(data["transform"]["linear"]) == 3
