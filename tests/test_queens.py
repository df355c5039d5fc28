import itertools

import pytest

from contestkit.queens import format_solution, n_queens


def _is_valid(solution):
    cells = list(enumerate(solution, start=1))
    for (r1, c1), (r2, c2) in itertools.combinations(cells, 2):
        if c1 == c2 or abs(c1 - c2) == abs(r1 - r2):
            return False
    return True


def test_four_queens():
    assert list(n_queens(4)) == [(2, 4, 1, 3), (3, 1, 4, 2)]


def test_eight_queens_count_and_validity():
    solutions = list(n_queens(8))
    assert len(solutions) == 92
    assert len(set(solutions)) == len(solutions)
    assert all(_is_valid(s) for s in solutions)
    assert solutions == sorted(solutions)


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_boards(n):
    assert list(n_queens(n)) == []


def test_trivial_boards():
    assert list(n_queens(0)) == [()]
    assert list(n_queens(1)) == [(1,)]


def test_negative_size():
    with pytest.raises(ValueError):
        list(n_queens(-1))


def test_format_solution():
    assert format_solution((2, 4, 1, 3)) == "(row,column) : (1,2)(2,4)(3,1)(4,3)"