import logging
import warnings

import numpy

from . import geometry
from . import parameterize
from .. import config
from .. import errors

logger = logging.getLogger(__name__)

def clamp_polynomial_order(order):
    """Return the polynomial order to use for a requested order.

    Orders above config.MAXIMUM_POLYNOMIAL_ORDER are numerically unstable for
    a global least-squares fit; they are reduced to that maximum and an
    UnsupportedOrderWarning is issued."""
    order = int(order)
    if order < 0:
        raise ValueError(f'Polynomial order must be >= 0, not {order}.')
    if order > config.MAXIMUM_POLYNOMIAL_ORDER:
        warnings.warn(f'Desired polynomial order {order} is not supported. Maximum polynomial order is '
            f'{config.MAXIMUM_POLYNOMIAL_ORDER}; will create a polynomial of order {config.MAXIMUM_POLYNOMIAL_ORDER} instead.',
            errors.UnsupportedOrderWarning, stacklevel=2)
        order = config.MAXIMUM_POLYNOMIAL_ORDER
    return order

def fit_polynomial(points, parameters, order=3):
    """Least-squares fit a polynomial in the parameter to each axis of a set
    of points.

    Parameters:
    points: array of n points x,y,z; shape=(n,3)
    parameters: array of shape (n,) containing the position of each point
        along the curve, generally in [0, 1].
    order: desired order of the polynomial. This will be clamped to the
        maximum supported order, and further reduced if there are not enough
        distinct parameter values to determine the polynomial.

    Returns an array of coefficients of shape (k,3), lowest power first, with
    one column per axis. The effective order is k-1."""
    points = geometry.as_points(points)
    n = len(points)
    if n < 3:
        raise errors.InsufficientPointsError(f'At least 3 points are required for a polynomial fit, but {n} were provided.')
    if parameters is None:
        raise errors.NullInputError('parameters must not be None.')
    parameters = numpy.asarray(parameters, dtype=float)
    if parameters.shape != (n,):
        raise errors.ParameterCountMismatchError(f'Incorrect number of point parameters provided: expected {n} '
            f'(one for each point), but {parameters.size} were provided.')
    num_coefficients = clamp_polynomial_order(order) + 1
    num_unique = len(numpy.unique(parameters))
    if num_unique < num_coefficients:
        # an underdetermined fit: drop to the order the data can support
        logger.warning('Only %d distinct point parameters: reducing polynomial order from %d to %d.',
            num_unique, num_coefficients - 1, num_unique - 1)
        num_coefficients = num_unique
    design = numpy.vander(parameters, num_coefficients, increasing=True)
    coefficients, residuals, rank, singular_values = numpy.linalg.lstsq(design, points, rcond=None)
    logger.debug('Fit polynomial of order %d to %d points (rank %d)', num_coefficients - 1, n, rank)
    return coefficients

def evaluate_polynomial(coefficients, t):
    """Evaluate per-axis polynomial coefficients of shape (k,3) at parameter
    values t, returning an array of shape (len(t), 3)."""
    t = numpy.asarray(t, dtype=float)
    return numpy.polynomial.polynomial.polyval(t, coefficients).T

def polynomial_points(points, segments_between_control_points, order=3, parameters=None):
    """Sample a polynomial curve fit to the given points.

    Parameters:
    points: array of n points x,y,z; shape=(n,3), with n >= 3.
    segments_between_control_points: number of samples per input point
        interval; (n-1)*segments_between_control_points+1 samples are returned.
    order: desired polynomial order (see fit_polynomial).
    parameters: position of each point along the curve, or None to use
        parameterize.parameters_from_indices().

    Returns an array of points evenly spaced in the parameter over [0, 1]."""
    points = geometry.as_points(points)
    if parameters is None:
        parameters = parameterize.parameters_from_indices(points)
    coefficients = fit_polynomial(points, parameters, order)
    num_points = (len(points) - 1) * segments_between_control_points + 1
    return evaluate_polynomial(coefficients, numpy.linspace(0, 1, num_points))
