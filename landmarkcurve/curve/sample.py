"""Generate dense point sequences along curves through control points.

The linear, cardinal-spline and Kochanek-spline samplers share one loop,
sample_curve(), which fills a pre-allocated buffer segment by segment using a
mode-specific evaluation function. The polynomial sampler instead evaluates a
global fit (see polyfit.polynomial_points).

For an open curve through n control points with s segments between control
points, (n-1)*s+1 points are produced. A looped curve gets n*s+2 points: the
extra points close the loop so that the first and last point coincide at the
midpoint of the first segment, which keeps the tube around the curve
continuous across the seam.
"""
import numpy

from . import geometry
from . import polyfit
from . import spline
from .. import errors

def allocate_curve_points(num_control_points, segments_between_control_points, loop=False):
    """Return an uninitialized (m,3) array for the points of a sampled curve."""
    if loop:
        num_points = num_control_points * segments_between_control_points + 2
    else:
        num_points = (num_control_points - 1) * segments_between_control_points + 1
    return numpy.empty((num_points, 3), dtype=float)

def close_loop(curve_points):
    """Move the first point of a looped curve to the midpoint of the first
    segment, and set the final point to the same position. Modifies the
    array in place and returns it."""
    start = geometry.midpoint(curve_points[0], curve_points[1])
    curve_points[0] = start
    curve_points[-1] = start
    return curve_points

def sample_curve(control_points, segments_between_control_points, loop, evaluate_segment):
    """Sample a curve through control points one segment at a time.

    Parameters:
    control_points: array of n points x,y,z; shape=(n,3), n >= 2.
    segments_between_control_points: number of samples per segment.
    loop: if True, add the segment from the last control point back to
        the first, and close the loop (see close_loop()).
    evaluate_segment: function(segment, fractions) returning an array of
        shape (len(fractions), 3) of points along the segment that starts at
        control point 'segment', at the given fractional positions in [0, 1).

    Returns an array of curve points."""
    control_points = geometry.as_points(control_points, 'control_points')
    n = len(control_points)
    if n < 2:
        raise errors.InsufficientPointsError(f'At least 2 control points are required to sample a curve, but {n} were provided.')
    s = segments_between_control_points
    curve_points = allocate_curve_points(n, s, loop)
    num_segments = n if loop else n - 1
    fractions = numpy.arange(s) / s
    for segment in range(num_segments):
        curve_points[segment*s:(segment+1)*s] = evaluate_segment(segment, fractions)
    # place the end exactly on the final control point (the first, for loops)
    curve_points[num_segments*s] = control_points[num_segments % n]
    if loop:
        close_loop(curve_points)
    return curve_points

def linear_curve_points(control_points, segments_between_control_points, loop=False):
    """Sample a piecewise-linear curve through the control points."""
    control_points = geometry.as_points(control_points, 'control_points')
    n = len(control_points)
    def evaluate_segment(segment, fractions):
        return geometry.interpolate_segment(control_points[segment], control_points[(segment + 1) % n], fractions)
    return sample_curve(control_points, segments_between_control_points, loop, evaluate_segment)

def spline_curve_points(control_points, parametric_spline, segments_between_control_points, loop=False):
    """Sample a ParametricSpline whose control point i lies at parameter i."""
    def evaluate_segment(segment, fractions):
        return parametric_spline.evaluate_points(segment + fractions)
    return sample_curve(control_points, segments_between_control_points, loop, evaluate_segment)

def cardinal_curve_points(control_points, segments_between_control_points, loop=False):
    """Sample a cardinal spline through the control points."""
    control_points = geometry.as_points(control_points, 'control_points')
    curve = spline.cardinal_spline(control_points, closed=loop)
    return spline_curve_points(control_points, curve, segments_between_control_points, loop)

def kochanek_curve_points(control_points, segments_between_control_points, loop=False,
        bias=0.0, continuity=0.0, tension=0.0, ends_copy_nearest_derivatives=False):
    """Sample a Kochanek-Bartels spline through the control points."""
    control_points = geometry.as_points(control_points, 'control_points')
    curve = spline.kochanek_spline(control_points, loop, bias, continuity, tension, ends_copy_nearest_derivatives)
    return spline_curve_points(control_points, curve, segments_between_control_points, loop)

def polynomial_curve_points(control_points, segments_between_control_points, order=3, parameters=None):
    """Sample a least-squares polynomial fit to the control points. Polynomial
    curves are never looped."""
    return polyfit.polynomial_points(control_points, segments_between_control_points, order, parameters)
