"""Assign each of a set of points a parameter value in [0, 1] describing its
position along the curve that the points are meant to define.

Two schemes are provided: parameters proportional to the index of each point
(suitable for points that are already in order along the curve), and
parameters derived from a minimum spanning tree over the points (suitable for
unordered point clouds).
"""
import logging

import numpy

from . import geometry
from .. import config
from .. import errors

logger = logging.getLogger(__name__)

def parameters_from_indices(points):
    """Return parameter values i/(n-1) for each of n points.

    Parameters:
    points: array of n points x,y,z; shape=(n,3)

    Returns an array of shape (n,) running from 0 to 1."""
    points = geometry.as_points(points)
    n = len(points)
    if n < 2:
        raise errors.InsufficientPointsError(f'At least 2 points are required to compute point parameters, but {n} were provided.')
    return numpy.arange(n) / (n - 1)

def minimum_spanning_tree(distances, root):
    """Find a minimum spanning tree of a complete graph with Prim's algorithm.

    Parameters:
    distances: (n,n) array of edge weights between each pair of vertices.
    root: index of the vertex from which to grow the tree.

    Returns an array of shape (n,) giving the parent of each vertex in the
    tree; the parent of the root is -1."""
    distances = numpy.asarray(distances, dtype=float)
    n = len(distances)
    parents = numpy.full(n, -1, dtype=int)
    keys = numpy.full(n, numpy.inf)
    in_tree = numpy.zeros(n, dtype=bool)
    keys[root] = 0
    for _ in range(n):
        # cheapest vertex not yet in the tree; ties go to the lowest index
        vertex = numpy.argmin(numpy.where(in_tree, numpy.inf, keys))
        in_tree[vertex] = True
        closer = ~in_tree & (distances[vertex] < keys)
        parents[closer] = vertex
        keys[closer] = distances[vertex, closer]
    return parents

def trunk_path(parents, end):
    """Return the vertex indices on the path from the root of a tree to the
    vertex 'end', ordered root first."""
    path = [end]
    while parents[path[-1]] != -1:
        path.append(parents[path[-1]])
    return numpy.array(path[::-1], dtype=int)

def parameters_from_minimum_spanning_tree(points):
    """Compute point parameters for an unordered set of points.

    The two points farthest apart are taken as the ends of the curve. A
    minimum spanning tree is grown from the first of these, and the path
    through the tree between the two ends (the "trunk") defines the curve:
    each trunk point gets its distance along the trunk divided by the total
    trunk length. Points off the trunk get the same parameter as the trunk
    point from which their branch of the tree leaves the trunk.

    Parameters:
    points: array of n points x,y,z; shape=(n,3)

    Returns an array of shape (n,) with values in [0, 1]."""
    points = geometry.as_points(points)
    n = len(points)
    if n < 2:
        raise errors.InsufficientPointsError(f'At least 2 points are required to compute point parameters, but {n} were provided.')
    distances = geometry.distance_matrix(points)
    start, end = geometry.farthest_pair(distances)
    parents = minimum_spanning_tree(distances, start)
    path = trunk_path(parents, end)
    path_distances = geometry.cumulative_distances(points[path], unit=False)
    total_length = path_distances[-1]
    if total_length == 0:
        raise errors.DegenerateInputError('Minimum spanning tree path has zero length: all points coincide.')
    path_parameters = path_distances / total_length
    logger.debug('Trunk of minimum spanning tree visits %d of %d points, length %g', len(path), n, total_length)

    position_on_trunk = numpy.full(n, -1, dtype=int)
    position_on_trunk[path] = numpy.arange(len(path))
    parameters = numpy.empty(n, dtype=float)
    for i in range(n):
        ancestor = i
        while position_on_trunk[ancestor] == -1:
            ancestor = parents[ancestor]
        parameters[i] = path_parameters[position_on_trunk[ancestor]]
    return parameters

def compute_point_parameters(points, parameter_type=config.PointParameterType.RAW_INDICES):
    """Compute point parameters with the scheme named by parameter_type
    (a config.PointParameterType or its string value)."""
    parameter_type = config.PointParameterType(parameter_type)
    if parameter_type is config.PointParameterType.MINIMUM_SPANNING_TREE:
        return parameters_from_minimum_spanning_tree(points)
    return parameters_from_indices(points)
