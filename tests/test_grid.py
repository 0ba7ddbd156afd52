import pytest

from bluenoise.grid import SpatialGrid
from bluenoise.types import GridCollisionError, Point


def test_grid_dimensions_tile_domain_exactly():
    grid = SpatialGrid(16.0, 16.0, 2.0)

    assert grid.shape == (12, 12)
    assert grid.cell_width * grid.columns == pytest.approx(16.0)
    assert grid.cell_width <= 2.0 / 2 ** 0.5
    assert grid.reach_x == 2
    assert grid.reach_y == 2


def test_grid_non_square_domain():
    grid = SpatialGrid(10.0, 3.0, 1.0)

    assert grid.shape == (15, 5)
    assert grid.cell_height <= 1.0 / 2 ** 0.5


def test_cell_of_uses_floor_division():
    grid = SpatialGrid(16.0, 16.0, 2.0)

    assert grid.cell_of((0.0, 0.0)) == (0, 0)
    assert grid.cell_of((15.9, 0.1)) == (11, 0)
    assert grid.cell_of(Point(2.7, 1.34)) == (2, 1)


def test_insert_into_occupied_cell_is_a_logic_error():
    grid = SpatialGrid(16.0, 16.0, 2.0)
    grid.insert((1.0, 1.0), 0)

    with pytest.raises(GridCollisionError):
        grid.insert((1.1, 1.1), 1)


def test_neighbors_wrap_across_seam():
    grid = SpatialGrid(16.0, 16.0, 2.0)
    grid.insert((15.9, 8.0), 0)
    grid.insert((8.0, 15.9), 1)

    assert list(grid.neighbors((0.5, 8.0))) == [0]
    assert list(grid.neighbors((8.0, 0.2))) == [1]


def test_neighbors_skip_far_cells():
    grid = SpatialGrid(16.0, 16.0, 2.0)
    grid.insert((8.0, 8.0), 0)

    assert list(grid.neighbors((1.0, 1.0))) == []


def test_neighbors_visit_each_cell_once_on_narrow_grid():
    grid = SpatialGrid(4.0, 4.0, 5.0)
    grid.insert((0.5, 0.5), 0)
    grid.insert((2.5, 2.5), 1)

    assert grid.shape == (2, 2)
    assert sorted(grid.neighbors((1.0, 1.0))) == [0, 1]
    assert len(grid) == 2


def test_candidate_across_seam_is_rejected():
    grid = SpatialGrid(16.0, 16.0, 2.0)
    points = [Point(15.9, 8.0)]
    grid.insert(points[0], 0)

    # planar distance is 15.4, wrapped distance is 0.6
    assert not grid.is_far_enough(Point(0.5, 8.0), points)
    assert grid.is_far_enough(Point(4.0, 8.0), points)


def test_exactly_min_distance_is_accepted():
    grid = SpatialGrid(16.0, 16.0, 2.0)
    points = [Point(4.0, 4.0)]
    grid.insert(points[0], 0)

    assert grid.is_far_enough(Point(6.0, 4.0), points)
    assert not grid.is_far_enough(Point(5.999, 4.0), points)
