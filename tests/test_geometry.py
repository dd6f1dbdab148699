import numpy
import pytest

from landmarkcurve import errors
from landmarkcurve.curve import geometry

def test_as_points():
    points = geometry.as_points([[0, 0, 0], [1, 2, 3]])
    assert points.dtype == float
    assert points.shape == (2, 3)
    assert geometry.as_points([]).shape == (0, 3)
    with pytest.raises(errors.NullInputError):
        geometry.as_points(None)
    with pytest.raises(ValueError):
        geometry.as_points([[0, 0], [1, 1]])

def test_cumulative_distances():
    points = numpy.array([[0, 0, 0], [3, 4, 0], [3, 4, 5]], dtype=float)
    assert numpy.allclose(geometry.cumulative_distances(points, unit=False), [0, 5, 10])
    assert numpy.allclose(geometry.cumulative_distances(points), [0, 0.5, 1])

def test_distance_matrix():
    points = numpy.array([[0, 0, 0], [3, 4, 0], [0, 0, 2]], dtype=float)
    distances = geometry.distance_matrix(points)
    assert distances.shape == (3, 3)
    assert numpy.allclose(distances, distances.T)
    assert numpy.allclose(numpy.diag(distances), 0)
    assert numpy.isclose(distances[0, 1], 5)
    assert numpy.isclose(distances[0, 2], 2)

def test_farthest_pair():
    points = numpy.array([[1, 0, 0], [0, 0, 0], [3, 0, 0]], dtype=float)
    assert geometry.farthest_pair(geometry.distance_matrix(points)) == (1, 2)
    assert geometry.farthest_pair(numpy.zeros((3, 3))) == (0, 0)

def test_interpolate_segment():
    out = geometry.interpolate_segment(numpy.array([0, 0, 0.]), numpy.array([2, 4, 6.]), [0, 0.5])
    assert numpy.allclose(out, [[0, 0, 0], [1, 2, 3]])

def test_midpoint():
    assert numpy.allclose(geometry.midpoint([0, 0, 0], [2, 2, 2]), [1, 1, 1])
