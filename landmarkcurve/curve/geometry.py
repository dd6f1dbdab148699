import numpy

from .. import errors

def as_points(points, name='points'):
    """Return the input as a float array of shape (n,3).

    Raises NullInputError if points is None, and ValueError if the input
    cannot be interpreted as a list of 3D points. An empty input yields an
    array of shape (0,3)."""
    if points is None:
        raise errors.NullInputError(f'{name} must not be None.')
    points = numpy.asarray(points, dtype=float)
    if points.size == 0:
        return points.reshape(0, 3)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f'{name} must have shape (n,3), not {points.shape}.')
    return points

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths."""
    points = numpy.asarray(points)
    distances = numpy.concatenate([[0], numpy.add.accumulate(numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)))])
    if unit:
        distances /= distances[-1]
    return distances

def distance_matrix(points):
    """Return the (n,n) array of Euclidean distances between all pairs of
    points in an (n,m) array."""
    points = numpy.asarray(points, dtype=float)
    diffs = points[:, numpy.newaxis, :] - points[numpy.newaxis, :, :]
    return numpy.sqrt((diffs**2).sum(axis=-1))

def farthest_pair(distances):
    """Return indices (i, j) of the largest entry in a distance matrix.

    If several pairs are equally far apart, the first in row-major order is
    returned. If all distances are zero, (0, 0) is returned."""
    i, j = numpy.unravel_index(numpy.argmax(distances), distances.shape)
    return int(i), int(j)

def interpolate_segment(p0, p1, fractions):
    """Return points along the line from p0 to p1 at the given fractional
    positions, as an array of shape (len(fractions), m)."""
    fractions = numpy.asarray(fractions, dtype=float)[:, numpy.newaxis]
    return (1 - fractions) * p0 + fractions * p1

def midpoint(p0, p1):
    """Return the point halfway between p0 and p1."""
    return numpy.asarray(p0) * 0.5 + numpy.asarray(p1) * 0.5
