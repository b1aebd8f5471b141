import pytest

from mandelbrot_raster.plane import pixel_to_point, plane_size, validate_bounds, validate_rectangle

UPPER_LEFT = complex(-1.0, 1.0)
LOWER_RIGHT = complex(1.0, -1.0)


def test_pixel_to_point_matches_known_point():
    point = pixel_to_point((100, 200), (25, 175), UPPER_LEFT, LOWER_RIGHT)
    assert point == complex(-0.5, -0.75)


@pytest.mark.parametrize(
    "bounds, upper_left, lower_right",
    [
        ((100, 200), UPPER_LEFT, LOWER_RIGHT),
        ((1, 1), complex(-2.5, 1.2), complex(1.0, -1.2)),
        ((1000, 750), complex(-1.20, 0.35), complex(-1.0, 0.20)),
    ],
)
def test_origin_pixel_is_upper_left(bounds, upper_left, lower_right):
    assert pixel_to_point(bounds, (0, 0), upper_left, lower_right) == upper_left


def test_columns_increase_real_part_and_rows_decrease_imaginary_part():
    bounds = (40, 30)
    upper_left = complex(-1.20, 0.35)
    lower_right = complex(-1.0, 0.20)
    for row in range(bounds[1]):
        reals = [pixel_to_point(bounds, (column, row), upper_left, lower_right).real for column in range(bounds[0])]
        assert all(a < b for a, b in zip(reals, reals[1:]))
    for column in range(bounds[0]):
        imags = [pixel_to_point(bounds, (column, row), upper_left, lower_right).imag for row in range(bounds[1])]
        assert all(a > b for a, b in zip(imags, imags[1:]))


def test_row_does_not_affect_real_part():
    first = pixel_to_point((10, 10), (3, 0), UPPER_LEFT, LOWER_RIGHT)
    last = pixel_to_point((10, 10), (3, 9), UPPER_LEFT, LOWER_RIGHT)
    assert first.real == last.real


def test_plane_size():
    assert plane_size(UPPER_LEFT, LOWER_RIGHT) == (2.0, 2.0)


def test_zero_bounds_are_not_guarded():
    with pytest.raises(ZeroDivisionError):
        pixel_to_point((0, 10), (0, 0), UPPER_LEFT, LOWER_RIGHT)


@pytest.mark.parametrize("bounds", [(0, 10), (10, 0), (-1, 5), (2.5, 3), (True, 3), (10,)])
def test_validate_bounds_rejects(bounds):
    with pytest.raises(ValueError):
        validate_bounds(bounds)


def test_validate_bounds_accepts_single_pixel():
    validate_bounds((1, 1))


@pytest.mark.parametrize(
    "upper_left, lower_right",
    [
        (complex(1.0, 1.0), complex(-1.0, -1.0)),
        (complex(-1.0, -1.0), complex(1.0, 1.0)),
        (complex(0.0, 1.0), complex(0.0, -1.0)),
        (complex(-1.0, 0.5), complex(1.0, 0.5)),
        (complex(float("nan"), 1.0), complex(1.0, -1.0)),
        (complex(-1.0, 1.0), complex(float("inf"), -1.0)),
    ],
)
def test_validate_rectangle_rejects(upper_left, lower_right):
    with pytest.raises(ValueError):
        validate_rectangle(upper_left, lower_right)


def test_validate_rectangle_accepts():
    validate_rectangle(UPPER_LEFT, LOWER_RIGHT)
