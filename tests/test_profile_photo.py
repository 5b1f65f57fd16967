import io

import pytest

from burbir.profile_photo import (
    BLUE,
    GREEN,
    NORMAL,
    RED,
    ProfilePhoto,
    colorize,
)
from burbir.reader import TapeReader


def identity(n):
    return ProfilePhoto(n, n, [[1 if i == j else 0 for j in range(n)] for i in range(n)])


@pytest.fixture
def sample():
    return ProfilePhoto(3, 3, [[2, 0, 1], [1, 3, 2], [1, 1, 1]])


@pytest.fixture
def other():
    return ProfilePhoto(3, 3, [[1, 2, 0], [0, 1, 4], [5, 0, 1]])


def test_colorize_uses_escape_codes():
    assert colorize("R", "*") == "\x1b[31m*\x1b[0m"
    assert colorize("G", "#") == GREEN + "#" + NORMAL
    assert colorize("B", "@") == BLUE + "@" + NORMAL


def test_colorize_unknown_colour():
    with pytest.raises(ValueError):
        colorize("Y", "*")


def test_read_and_render():
    reader = TapeReader(io.StringIO("R * G #\nB @ X !;"))
    photo = ProfilePhoto.read(reader, 2, 4)
    assert photo.cells == (("R", "*", "G", "#"), ("B", "@", "X", "!"))
    expected = RED + "*" + NORMAL + GREEN + "#" + NORMAL + "\n" + BLUE + "@" + NORMAL + "\n"
    assert photo.render() == expected


def test_render_odd_columns_uses_blank():
    photo = ProfilePhoto(1, 3, [["R", "*", "G"]])
    assert photo.render() == colorize("R", "*") + colorize("G", " ") + "\n"


def test_read_too_few_characters():
    reader = TapeReader(io.StringIO("R * G;"))
    with pytest.raises(ValueError):
        ProfilePhoto.read(reader, 2, 2)


def test_size_limit():
    with pytest.raises(ValueError):
        ProfilePhoto(101, 1)


def test_cells_shape_checked():
    with pytest.raises(ValueError):
        ProfilePhoto(2, 2, [[1, 2], [3]])


def test_index_checks(sample):
    assert ProfilePhoto.is_index_valid(99, 99)
    assert not ProfilePhoto.is_index_valid(100, 0)
    assert sample.is_index_effective(2, 2)
    assert not sample.is_index_effective(3, 0)
    assert not sample.is_index_effective(-1, 0)


def test_diagonal(sample):
    assert [sample.diagonal(i) for i in range(3)] == [2, 3, 1]
    with pytest.raises(IndexError):
        sample.diagonal(3)


def test_copy_is_equal(sample):
    duplicate = sample.copy()
    assert duplicate == sample
    assert duplicate is not sample


def test_add_subtract_round_trip(sample, other):
    assert sample.add(other).subtract(other) == sample


def test_add_size_mismatch(sample):
    with pytest.raises(ValueError):
        sample.add(ProfilePhoto(2, 2))


def test_multiply_by_identity(sample):
    assert sample.multiply(identity(3)) == sample
    assert identity(3).multiply(sample) == sample


def test_multiply_shape_mismatch(sample):
    with pytest.raises(ValueError):
        sample.multiply(ProfilePhoto(2, 3))


def test_multiply_rectangular_shape():
    a = ProfilePhoto(2, 3, [[1, 2, 3], [4, 5, 6]])
    product = a.multiply(a.transpose())
    assert (product.rows, product.cols) == (2, 2)
    assert product.is_symmetric()


def test_multiply_mod_bounds(sample, other):
    result = sample.multiply_mod(other, 5)
    assert all(0 <= cell < 5 for row in result.cells for cell in row)
    plain = sample.multiply(other)
    assert all(
        (p - r) % 5 == 0
        for prow, rrow in zip(plain.cells, result.cells)
        for p, r in zip(prow, rrow)
    )


def test_multiply_mod_keeps_dividend_sign():
    result = ProfilePhoto(1, 1, [[-7]]).multiply_mod(ProfilePhoto(1, 1, [[1]]), 3)
    assert result.cells == ((-1,),)


def test_negation_twice(sample):
    assert sample.negation().negation() == sample
    assert sample.add(sample.negation()) == ProfilePhoto(3, 3)


def test_scale_matches_repeated_add(sample):
    assert sample.scale(2) == sample.add(sample)


def test_transpose_twice(sample):
    assert sample.transpose().transpose() == sample
    assert sample.transpose().cells[0] == (2, 1, 1)


def test_determinant_identity_and_diagonal():
    assert identity(4).determinant() == 1.0
    assert ProfilePhoto(2, 2, [[1, 2], [3, 4]]).determinant() == -2.0
    diag = ProfilePhoto(3, 3, [[2, 0, 0], [0, 3, 0], [0, 0, 4]])
    assert diag.determinant() == 24.0


def test_determinant_repeated_rows_is_zero():
    photo = ProfilePhoto(3, 3, [[1, 2, 3], [1, 2, 3], [4, 5, 6]])
    assert photo.determinant() == 0.0


def test_determinant_is_multiplicative(sample, other):
    product = sample.multiply(other)
    assert product.determinant() == sample.determinant() * other.determinant()


def test_determinant_transpose_invariant(sample):
    assert sample.transpose().determinant() == sample.determinant()


def test_determinant_non_square():
    with pytest.raises(ValueError):
        ProfilePhoto(2, 3).determinant()


def test_size_predicates(sample):
    assert sample.count() == 9
    assert sample.is_square()
    assert not ProfilePhoto(2, 3).is_square()
    assert sample.same_size(ProfilePhoto(3, 3))
    assert not sample.same_size(ProfilePhoto(3, 2))


def test_symmetric_and_identity(sample):
    assert identity(3).is_symmetric()
    assert identity(3).is_identity()
    assert not sample.is_symmetric()
    assert not sample.is_identity()
    assert not ProfilePhoto(2, 3).is_symmetric()


def test_sparse():
    assert ProfilePhoto(5, 5).is_sparse()
    assert not identity(3).is_sparse()
    big = ProfilePhoto(10, 10, [[1 if (i, j) == (0, 0) else 0 for j in range(10)] for i in range(10)])
    assert big.is_sparse()


def test_equality_requires_same_size():
    assert ProfilePhoto(1, 2, [[0, 0]]) != ProfilePhoto(2, 1, [[0], [0]])