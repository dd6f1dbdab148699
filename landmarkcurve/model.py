"""Generate curve models (tube meshes) through a set of control points.

Degenerate inputs are handled the same way for every curve type:
    - no points: an empty PolyData.
    - one point: a sphere of the tube radius at that point.
    - two points: a straight line, as splines and polynomials cannot do any
      better with two points.
"""
import logging

import pyvista

from . import config
from . import mesh
from .curve import geometry
from .curve import parameterize
from .curve import sample

logger = logging.getLogger(__name__)

def curve_points(control_points, curve_type, cfg=config.DEFAULT_CONFIG, point_parameters=None,
        point_parameter_type=config.PointParameterType.RAW_INDICES):
    """Return the dense sequence of points along a curve of the given type
    through at least two control points.

    Parameters:
    control_points: array of n points x,y,z; shape=(n,3)
    curve_type: a config.CurveType (or its string value).
    cfg: a config.CurveConfig instance.
    point_parameters: for polynomial curves, the position of each control point
        along the curve (one value per point). If None, the parameters are
        computed according to point_parameter_type.
    point_parameter_type: a config.PointParameterType.

    Returns an array of shape (m,3)."""
    control_points = geometry.as_points(control_points, 'control_points')
    curve_type = config.CurveType(curve_type)
    s = cfg.segments_between_control_points
    if len(control_points) == 2 or curve_type is config.CurveType.LINEAR:
        return sample.linear_curve_points(control_points, s, cfg.tube_loop)
    elif curve_type is config.CurveType.CARDINAL_SPLINE:
        return sample.cardinal_curve_points(control_points, s, cfg.tube_loop)
    elif curve_type is config.CurveType.KOCHANEK_SPLINE:
        return sample.kochanek_curve_points(control_points, s, cfg.tube_loop,
            bias=cfg.kochanek_bias, continuity=cfg.kochanek_continuity, tension=cfg.kochanek_tension,
            ends_copy_nearest_derivatives=cfg.kochanek_ends_copy_nearest_derivatives)
    else:
        if point_parameters is None:
            point_parameters = parameterize.compute_point_parameters(control_points, point_parameter_type)
        return sample.polynomial_curve_points(control_points, s, cfg.polynomial_order, point_parameters)

def generate_curve_model(control_points, curve_type, cfg=config.DEFAULT_CONFIG, point_parameters=None,
        point_parameter_type=config.PointParameterType.RAW_INDICES):
    """Generate a mesh for a curve of the given type through a set of points.

    Parameters are as for curve_points(), except that any number of control
    points (including zero) may be given.

    Returns a pyvista.PolyData: a capped tube around the curve, or the curve
    polyline itself if cfg.tube_radius is 0.

    Raises errors.NullInputError if control_points is None, and, for
    polynomial curves, errors.ParameterCountMismatchError if point_parameters
    does not have one value per point or errors.DegenerateInputError if
    minimum-spanning-tree parameters are requested for coincident points."""
    control_points = geometry.as_points(control_points, 'control_points')
    curve_type = config.CurveType(curve_type)
    n = len(control_points)
    logger.debug('Generating %s curve model from %d control points', curve_type.value, n)
    if n == 0:
        return pyvista.PolyData()
    if n == 1:
        return mesh.sphere_polydata(control_points[0], cfg.tube_radius, cfg.tube_number_of_sides)
    points = curve_points(control_points, curve_type, cfg, point_parameters, point_parameter_type)
    return mesh.tube_polydata(points, cfg.tube_radius, cfg.tube_number_of_sides)

def generate_linear_model(control_points, cfg=config.DEFAULT_CONFIG):
    return generate_curve_model(control_points, config.CurveType.LINEAR, cfg)

def generate_cardinal_spline_model(control_points, cfg=config.DEFAULT_CONFIG):
    return generate_curve_model(control_points, config.CurveType.CARDINAL_SPLINE, cfg)

def generate_kochanek_spline_model(control_points, cfg=config.DEFAULT_CONFIG):
    return generate_curve_model(control_points, config.CurveType.KOCHANEK_SPLINE, cfg)

def generate_polynomial_model(control_points, cfg=config.DEFAULT_CONFIG, point_parameters=None,
        point_parameter_type=config.PointParameterType.RAW_INDICES):
    return generate_curve_model(control_points, config.CurveType.POLYNOMIAL, cfg, point_parameters, point_parameter_type)
