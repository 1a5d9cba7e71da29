import math

import pytest

from geometry.errors import DimensionError, ShapeError
from geometry.matrix import Matrix
from geometry.quaternion import Quaternion
from geometry.vector import Vector


def _unit(a, b, c, d) -> Quaternion:
    norm = math.sqrt(a * a + b * b + c * c + d * d)
    return Quaternion(a / norm, b / norm, c / norm, d / norm)


@pytest.mark.parametrize(
    "q",
    [
        Quaternion(1.0, 0.0, 0.0, 0.0),
        _unit(1.0, 2.0, 3.0, 4.0),
        _unit(-0.5, 0.1, 0.0, 2.0),
        Quaternion.from_vector3d(Vector((0.0, 0.6, 0.8)), 0.4),
    ],
)
def test_matrix_embedding_roundtrip(q):
    assert Quaternion.from_matrix(q.to_matrix()).isclose(q)


def test_hamilton_products():
    i = Quaternion(0.0, 1.0, 0.0, 0.0)
    j = Quaternion(0.0, 0.0, 1.0, 0.0)
    k = Quaternion(0.0, 0.0, 0.0, 1.0)
    assert i.mult(j).isclose(k)
    assert j.mult(i).isclose(Quaternion(0.0, 0.0, 0.0, -1.0))
    assert i.mult(i).isclose(Quaternion(-1.0, 0.0, 0.0, 0.0))
    assert j.mult(k).isclose(i)


def test_embedding_is_multiplicative():
    p = Quaternion(0.5, -1.0, 2.0, 0.25)
    q = Quaternion(-1.5, 0.0, 1.0, 3.0)
    product = p.to_matrix().matrix_product(q.to_matrix())
    assert product.isclose(p.mult(q).to_matrix())


def test_unit_quaternion_times_conjugate_is_identity():
    q = _unit(0.3, -0.2, 0.9, 0.1)
    assert q.mult(q.conjugate()).isclose(Quaternion(1.0, 0.0, 0.0, 0.0))
    assert q.norm() == pytest.approx(1.0)


def test_vector_conversions():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert list(q.to_vector()) == [1.0, 2.0, 3.0, 4.0]
    assert list(q.to_vector3d()) == [2.0, 3.0, 4.0]
    assert Quaternion.from_vector(q.to_vector()) == q


def test_from_vector_rejects_wrong_length():
    with pytest.raises(DimensionError):
        Quaternion.from_vector(Vector((1.0, 2.0, 3.0)))


def test_from_matrix_rejects_wrong_shape():
    with pytest.raises(ShapeError):
        Quaternion.from_matrix(Matrix.identity(3))


def test_from_vector3d_default_angle_is_nearly_pure():
    q = Quaternion.from_vector3d(Vector((1.0, 2.0, 3.0)))
    assert q.a == pytest.approx(0.0, abs=1e-15)
    assert (q.b, q.c, q.d) == pytest.approx((1.0, 2.0, 3.0))
    assert Quaternion.pure(Vector((1.0, 2.0, 3.0))).a == 0.0


def test_add_is_componentwise():
    total = Quaternion(1.0, 2.0, 3.0, 4.0).add(Quaternion(0.5, -2.0, 1.0, 0.0))
    assert total == Quaternion(1.5, 0.0, 4.0, 4.0)


def test_str_shows_signed_units():
    assert str(Quaternion(1.0, -2.0, 0.5, 3.0)) == "1.0 - 2.0i + 0.5j + 3.0k"
