import pytest

from tableau_lp import SingularSystemError, solve_linear_system


def test_two_by_two():
    assert solve_linear_system([[2, 1], [2, 3]], [6, 9]) == pytest.approx([2.25, 1.5])


def test_needs_row_exchange():
    A = [[0, 2, 1], [1, 1, 0], [3, 0, 1]]
    x = solve_linear_system(A, [5, 3, 4])
    assert x == pytest.approx([1, 2, 1])


def test_singular():
    with pytest.raises(SingularSystemError):
        solve_linear_system([[1, 2], [2, 4]], [3, 6])


def test_shape_mismatch():
    with pytest.raises(ValueError):
        solve_linear_system([[1, 2, 3], [4, 5, 6]], [1, 2])
