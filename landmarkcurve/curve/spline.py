"""Interpolating cubic splines over indexed control points.

Two kinds of 1D spline are provided, CardinalSpline and KochanekSpline. Both
are built by adding (t, value) pairs with add_point() and evaluated at
arbitrary parameter values with evaluate(). Each is stored as a set of cubic
pieces, one per interval between knots, expressed in terms of the local
position u in [0, 1] within the interval:
    value(u) = c0 + c1*u + c2*u**2 + c3*u**3

A 3D curve is represented by a ParametricSpline, which holds one 1D spline
per axis. Use cardinal_spline() or kochanek_spline() to construct one from an
array of control points, where control point i is placed at parameter t=i.
"""
import numpy
from scipy import interpolate

from . import geometry
from .. import errors

class _PiecewiseCubic:
    def __init__(self, closed=False):
        self.closed = closed
        self._t = []
        self._values = []
        self._knots = None
        self._coefficients = None

    def add_point(self, t, value):
        """Add a knot at parameter t with the given value. Knots must be
        added in order of increasing t."""
        if self._t and t <= self._t[-1]:
            raise ValueError(f'Spline knots must be strictly increasing: {t} follows {self._t[-1]}.')
        self._t.append(float(t))
        self._values.append(float(value))
        self._knots = None

    def __len__(self):
        return len(self._t)

    def _knot_values(self):
        """Return the knots and values, with an extra closing knot for closed
        splines placed one first-interval width after the last knot."""
        knots = numpy.array(self._t)
        values = numpy.array(self._values)
        if self.closed:
            knots = numpy.append(knots, knots[-1] + (knots[1] - knots[0]))
            values = numpy.append(values, values[0])
        return knots, values

    def _fit(self, knots, values):
        """Return coefficients of shape (len(knots)-1, 4) for the cubic pieces."""
        raise NotImplementedError()

    def compute(self):
        if len(self._t) < 2:
            raise errors.InsufficientPointsError(f'At least 2 knots are required to compute a spline, but {len(self._t)} were provided.')
        knots, values = self._knot_values()
        self._coefficients = self._fit(knots, values)
        self._knots = knots
        self._end_value = values[-1]

    @property
    def parameter_range(self):
        if self._knots is None:
            self.compute()
        return self._knots[0], self._knots[-1]

    def evaluate(self, t):
        """Evaluate the spline at parameter value(s) t. Values outside of the
        range of the knots are clamped to that range. At a knot, the value
        given for that knot is returned exactly."""
        if self._knots is None:
            self.compute()
        knots = self._knots
        t = numpy.clip(numpy.asarray(t, dtype=float), knots[0], knots[-1])
        interval = (numpy.searchsorted(knots, t, side='right') - 1).clip(0, len(knots) - 2)
        u = (t - knots[interval]) / (knots[interval+1] - knots[interval])
        c0, c1, c2, c3 = self._coefficients[interval].T
        out = c0 + u*(c1 + u*(c2 + u*c3))
        out = numpy.where(t == knots[-1], self._end_value, out)
        return out if out.ndim else float(out)


class CardinalSpline(_PiecewiseCubic):
    """C2-continuous interpolating cubic spline.

    Open splines have their first derivative at each end fixed to left_value
    and right_value (zero by default). Closed splines are periodic, with the
    closing interval running from the last knot back to the first.
    """
    def __init__(self, closed=False, left_value=0.0, right_value=0.0):
        super().__init__(closed)
        self.left_value = left_value
        self.right_value = right_value

    def _fit(self, knots, values):
        if self.closed:
            bc_type = 'periodic'
        else:
            bc_type = ((1, self.left_value), (1, self.right_value))
        spline = interpolate.CubicSpline(knots, values, bc_type=bc_type)
        # scipy stores the pieces in powers of (t - knot), highest first;
        # rescale to powers of the local position u = (t - knot) / width.
        widths = numpy.diff(knots)
        powers = numpy.arange(4)
        return spline.c[::-1].T * widths[:, numpy.newaxis]**powers


class KochanekSpline(_PiecewiseCubic):
    """Kochanek-Bartels (tension / continuity / bias) interpolating spline.

    The same bias, continuity and tension are applied at every knot. All zero
    gives a Catmull-Rom spline.

    The tangent at each end of an open spline is determined by the
    left_constraint and right_constraint:
        0: the tangent is the difference between the parameter values (not
           the knot values) of the two nearest knots, i.e. a first derivative
           of 1 regardless of the data.
        1: the first derivative is set to left_value / right_value.
    Closed splines wrap the tangent computation across the seam instead.
    """
    def __init__(self, closed=False, bias=0.0, continuity=0.0, tension=0.0,
            left_constraint=0, left_value=0.0, right_constraint=0, right_value=0.0):
        super().__init__(closed)
        self.bias = bias
        self.continuity = continuity
        self.tension = tension
        self.left_constraint = left_constraint
        self.left_value = left_value
        self.right_constraint = right_constraint
        self.right_value = right_value

    def _tangents(self, y_prev, y, y_next, width_prev, width_next):
        """Return the incoming and outgoing tangents at knots with value y."""
        b, c, t = self.bias, self.continuity, self.tension
        d_prev = y - y_prev
        d_next = y_next - y
        incoming = (1-t)*(1-c)*(1+b)/2 * d_prev + (1-t)*(1+c)*(1-b)/2 * d_next
        outgoing = (1-t)*(1+c)*(1+b)/2 * d_prev + (1-t)*(1-c)*(1-b)/2 * d_next
        # adjust for non-uniform spacing between knots
        incoming *= 2 * width_prev / (width_prev + width_next)
        outgoing *= 2 * width_next / (width_prev + width_next)
        return incoming, outgoing

    def _fit(self, knots, y):
        widths = numpy.diff(knots)
        incoming = numpy.empty_like(y)
        outgoing = numpy.empty_like(y)
        incoming[1:-1], outgoing[1:-1] = self._tangents(y[:-2], y[1:-1], y[2:], widths[:-1], widths[1:])
        if self.closed:
            # y[-1] duplicates y[0], so the knot before the seam is y[-2]
            ds, dd = self._tangents(y[-2], y[0], y[1], widths[-1], widths[0])
            incoming[[0, -1]] = ds
            outgoing[[0, -1]] = dd
        else:
            # constraint 0 takes the end tangent from the spacing of the two
            # nearest knots, independent of their values
            if self.left_constraint == 1:
                outgoing[0] = self.left_value * widths[0]
            else:
                outgoing[0] = widths[0]
            if self.right_constraint == 1:
                incoming[-1] = self.right_value * widths[-1]
            else:
                incoming[-1] = widths[-1]
        y0, y1 = y[:-1], y[1:]
        dd, ds = outgoing[:-1], incoming[1:]
        return numpy.transpose([
            y0,
            dd,
            -3*y0 + 3*y1 - 2*dd - ds,
            2*y0 - 2*y1 + dd + ds
        ])


class ParametricSpline:
    """A 3D curve made of one 1D spline per axis."""
    def __init__(self, splines):
        self.splines = list(splines)

    def evaluate(self, axis, t):
        """Evaluate the spline for a single axis (0, 1 or 2) at t."""
        return self.splines[axis].evaluate(t)

    def evaluate_points(self, t):
        """Evaluate the curve at parameter values t, returning an array of
        shape (len(t), 3)."""
        t = numpy.asarray(t, dtype=float)
        return numpy.stack([spline.evaluate(t) for spline in self.splines], axis=-1)


def _add_control_points(splines, points):
    for i, point in enumerate(points):
        for spline, value in zip(splines, point):
            spline.add_point(i, value)
    return ParametricSpline(splines)

def cardinal_spline(points, closed=False):
    """Return a ParametricSpline of cardinal splines through the given
    points, with point i at parameter value i."""
    points = geometry.as_points(points)
    return _add_control_points([CardinalSpline(closed) for _ in range(3)], points)

def kochanek_spline(points, closed=False, bias=0.0, continuity=0.0, tension=0.0, ends_copy_nearest_derivatives=False):
    """Return a ParametricSpline of Kochanek-Bartels splines through the given
    points, with point i at parameter value i.

    If ends_copy_nearest_derivatives is True, the end derivatives of an open
    curve are set explicitly to the differences between the first two and the
    last two points."""
    points = geometry.as_points(points)
    if ends_copy_nearest_derivatives and len(points) >= 2:
        left = points[1] - points[0]
        right = points[-1] - points[-2]
        splines = [KochanekSpline(closed, bias, continuity, tension,
                left_constraint=1, left_value=left[axis], right_constraint=1, right_value=right[axis])
            for axis in range(3)]
    else:
        splines = [KochanekSpline(closed, bias, continuity, tension) for _ in range(3)]
    return _add_control_points(splines, points)
