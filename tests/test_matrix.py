import numpy as np
import pytest

from geometry.errors import DimensionError, ShapeError, SingularMatrixError
from geometry.matrix import Matrix
from geometry.vector import Vector

M3 = [(2.0, 1.0, 3.0), (0.0, -1.0, 4.0), (5.0, 2.0, 1.0)]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_identity_determinant_is_one(n):
    assert Matrix.identity(n).determinant() == pytest.approx(1.0)


def test_laplace_determinant():
    assert Matrix(M3).determinant() == pytest.approx(17.0)
    assert Matrix([(4.0,)]).determinant() == 4.0
    assert Matrix([(1.0, 2.0), (3.0, 4.0)]).determinant() == pytest.approx(-2.0)


def test_row_swap_negates_determinant():
    swapped = [M3[1], M3[0], M3[2]]
    assert Matrix(swapped).determinant() == pytest.approx(-Matrix(M3).determinant())


def test_determinant_matches_numpy_for_4x4():
    data = np.array(
        [
            [1.0, 2.0, 0.5, -1.0],
            [0.0, 3.0, 1.0, 2.0],
            [4.0, -2.0, 1.0, 0.0],
            [1.0, 1.0, 1.0, 1.0],
        ]
    )
    assert Matrix(data.tolist()).determinant() == pytest.approx(np.linalg.det(data))


def test_submatrix_removes_column_then_row():
    minor = Matrix(M3).submatrix(1, 0)
    assert np.allclose(minor.to_array(), [[0.0, 4.0], [5.0, 1.0]])


def test_cofactor_and_adjugate_of_2x2():
    m = Matrix([(1.0, 2.0), (3.0, 4.0)])
    assert np.allclose(m.cofactor().to_array(), [[4.0, -3.0], [-2.0, 1.0]])
    assert np.allclose(m.adjugate().to_array(), [[4.0, -2.0], [-3.0, 1.0]])


def test_inverse_times_matrix_is_identity():
    m = Matrix(M3)
    assert m.matrix_product(m.inverse()).isclose(Matrix.identity(3), atol=1e-9)
    assert m.inverse().matrix_product(m).isclose(Matrix.identity(3), atol=1e-9)
    assert np.allclose(m.inverse().to_array(), np.linalg.inv(np.array(M3)))


def test_inverse_of_1x1():
    assert np.allclose(Matrix([(4.0,)]).inverse().to_array(), [[0.25]])


def test_singular_inverse_raises():
    with pytest.raises(SingularMatrixError):
        Matrix([(1.0, 2.0), (2.0, 4.0)]).inverse()
    with pytest.raises(SingularMatrixError):
        Matrix([(1e-14, 0.0), (0.0, 1.0)]).inverse()


def test_square_only_operations_reject_rectangles():
    rect = Matrix([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)])
    assert not rect.is_square()
    for operation in (rect.determinant, rect.cofactor, rect.adjugate, rect.inverse):
        with pytest.raises(ShapeError):
            operation()
    with pytest.raises(ShapeError):
        rect.submatrix(0, 0)


def test_ragged_and_empty_rows_rejected():
    with pytest.raises(ShapeError):
        Matrix([(1.0, 2.0), (3.0,)])
    with pytest.raises(ShapeError):
        Matrix([])


def test_transpose_of_rectangle():
    rect = Matrix([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)])
    t = rect.transpose()
    assert (t.height(), t.width()) == (3, 2)
    assert np.allclose(t.to_array(), [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]])


def test_products_and_scale():
    a = Matrix([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)])
    b = Matrix([(1.0, 0.0), (0.0, 1.0), (1.0, 1.0)])
    assert np.allclose(a.matrix_product(b).to_array(), [[4.0, 5.0], [10.0, 11.0]])
    assert list(a.vector_product(Vector((1.0, 1.0, 1.0)))) == [6.0, 15.0]
    assert np.allclose(a.scale(2).to_array(), [[2.0, 4.0, 6.0], [8.0, 10.0, 12.0]])


def test_product_shape_checks():
    a = Matrix([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)])
    with pytest.raises(ShapeError):
        a.matrix_product(a)
    with pytest.raises(DimensionError):
        a.vector_product(Vector((1.0, 2.0)))


def test_rows_are_copied_on_construction():
    row = Vector((1.0, 2.0))
    m = Matrix([row, (3.0, 4.0)])
    row.x = 99.0
    assert m.entry(0, 0) == 1.0
