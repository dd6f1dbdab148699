"""Convert sampled curve points into pyvista PolyData meshes: a polyline, a
capped tube around the polyline, or a sphere marking a single point."""
import logging

import numpy
import pyvista

from . import errors
from .curve import geometry

logger = logging.getLogger(__name__)

def line_polydata(points):
    """Return a PolyData with a single polyline cell visiting every point in order.

    Parameters:
    points: array of n points x,y,z; shape=(n,3)"""
    points = geometry.as_points(points)
    n = len(points)
    if n == 0:
        return pyvista.PolyData()
    # polyline cell: [n, id0, id1, ..., id(n-1)]
    lines = numpy.concatenate([[n], numpy.arange(n)])
    return pyvista.PolyData(points.copy(), lines=lines)

def tube_polydata(points, radius, number_of_sides):
    """Return a capped tube of the given radius around a polyline.

    Parameters:
    points: array of n points x,y,z; shape=(n,3), in order along the curve.
    radius: tube radius. If 0, the polyline itself is returned.
    number_of_sides: number of sides of the tube cross-section."""
    line = line_polydata(points)
    if radius <= 0:
        return line
    logger.debug('Extruding tube of radius %g with %d sides around %d points', radius, number_of_sides, line.n_points)
    return line.tube(radius=radius, n_sides=number_of_sides, capping=True)

def sphere_polydata(center, radius, number_of_sides):
    """Return a UV-sphere of the given radius centered on a point, with
    number_of_sides divisions in both latitude and longitude."""
    if center is None:
        raise errors.NullInputError('Input point for sphere generation must not be None.')
    center = numpy.asarray(center, dtype=float).reshape(3)
    return pyvista.Sphere(radius=radius, center=tuple(center),
        theta_resolution=number_of_sides, phi_resolution=number_of_sides)
