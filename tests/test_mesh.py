import numpy
import pytest

from landmarkcurve import errors
from landmarkcurve import mesh

POINTS = numpy.array([[0, 0, 0], [1, 0, 0], [2, 0, 0], [3, 0, 0]], dtype=float)

def test_line_polydata():
    line = mesh.line_polydata(POINTS)
    assert line.n_points == 4
    assert line.n_cells == 1
    assert list(line.lines) == [4, 0, 1, 2, 3]
    assert numpy.allclose(line.points, POINTS)

def test_line_polydata_does_not_alias_input():
    points = POINTS.copy()
    line = mesh.line_polydata(points)
    points[0] = [9, 9, 9]
    assert numpy.allclose(line.points[0], [0, 0, 0])

def test_zero_radius_tube_is_line():
    line = mesh.line_polydata(POINTS)
    tube = mesh.tube_polydata(POINTS, 0, 8)
    assert numpy.array_equal(tube.points, line.points)
    assert numpy.array_equal(tube.lines, line.lines)

def test_tube():
    radius = 0.5
    tube = mesh.tube_polydata(POINTS, radius, 8)
    assert tube.n_points > len(POINTS)
    assert tube.n_cells > 0
    xmin, xmax, ymin, ymax, zmin, zmax = tube.bounds
    assert numpy.isclose(xmin, 0, atol=1e-6) and numpy.isclose(xmax, 3, atol=1e-6)
    assert 0.9 * radius < ymax <= radius + 1e-6
    assert -radius - 1e-6 <= ymin < -0.9 * radius

def test_sphere():
    center = numpy.array([1, 2, 3], dtype=float)
    sphere = mesh.sphere_polydata(center, 2.0, 8)
    assert sphere.n_points > 0
    assert numpy.allclose(sphere.center, center, atol=1e-5)
    distances = numpy.sqrt(((sphere.points - center)**2).sum(axis=1))
    assert numpy.allclose(distances, 2.0, atol=1e-5)

def test_null_inputs():
    with pytest.raises(errors.NullInputError):
        mesh.line_polydata(None)
    with pytest.raises(errors.NullInputError):
        mesh.tube_polydata(None, 1, 8)
    with pytest.raises(errors.NullInputError):
        mesh.sphere_polydata(None, 1, 8)
