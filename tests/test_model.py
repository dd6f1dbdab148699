import numpy
import pytest

from landmarkcurve import config
from landmarkcurve import errors
from landmarkcurve import model

CURVE_TYPES = list(config.CurveType)
NONLINEAR_TYPES = [t for t in CURVE_TYPES if t is not config.CurveType.LINEAR]

POINTS = numpy.array([
    [0, 0, 0],
    [1, 2, 0],
    [3, 3, 1],
    [4, 1, 2],
    [6, 0, 1],
], dtype=float)

@pytest.mark.parametrize('curve_type', CURVE_TYPES)
def test_no_points_gives_empty_mesh(curve_type):
    out = model.generate_curve_model(numpy.zeros((0, 3)), curve_type)
    assert out.n_points == 0
    assert out.n_cells == 0

@pytest.mark.parametrize('curve_type', CURVE_TYPES)
def test_one_point_gives_sphere(curve_type):
    point = numpy.array([[5, -1, 2]], dtype=float)
    cfg = config.CurveConfig(tube_radius=1.5, tube_number_of_sides=10)
    out = model.generate_curve_model(point, curve_type, cfg)
    assert numpy.allclose(out.center, point[0], atol=1e-5)
    distances = numpy.sqrt(((out.points - point[0])**2).sum(axis=1))
    assert numpy.allclose(distances, 1.5, atol=1e-5)

@pytest.mark.parametrize('loop', [False, True])
@pytest.mark.parametrize('curve_type', NONLINEAR_TYPES)
def test_two_points_match_linear(curve_type, loop):
    points = POINTS[:2]
    for radius in (0, 1):
        cfg = config.CurveConfig(tube_loop=loop, tube_radius=radius)
        linear = model.generate_linear_model(points, cfg)
        out = model.generate_curve_model(points, curve_type, cfg)
        assert numpy.array_equal(out.points, linear.points)
        assert out.n_cells == linear.n_cells

def test_collinear_linear_scenario():
    points = numpy.array([[0, 0, 0], [1, 0, 0], [2, 0, 0], [3, 0, 0]], dtype=float)
    cfg = config.CurveConfig(segments_between_control_points=1, tube_radius=0)
    assert numpy.array_equal(model.curve_points(points, config.CurveType.LINEAR, cfg), points)
    out = model.generate_linear_model(points, cfg)
    assert out.n_points == 4
    assert out.n_cells == 1
    assert list(out.lines) == [4, 0, 1, 2, 3]
    assert numpy.array_equal(out.points, points)

@pytest.mark.parametrize('curve_type', [config.CurveType.LINEAR, config.CurveType.CARDINAL_SPLINE, config.CurveType.KOCHANEK_SPLINE])
def test_looped_curve_points_are_closed(curve_type):
    cfg = config.CurveConfig(tube_loop=True)
    out = model.curve_points(POINTS, curve_type, cfg)
    assert out.shape == (len(POINTS) * cfg.segments_between_control_points + 2, 3)
    assert numpy.array_equal(out[0], out[-1])

def test_polynomial_ignores_loop():
    cfg = config.CurveConfig(tube_loop=True)
    out = model.curve_points(POINTS, config.CurveType.POLYNOMIAL, cfg)
    assert out.shape == ((len(POINTS) - 1) * cfg.segments_between_control_points + 1, 3)

@pytest.mark.parametrize('curve_type', CURVE_TYPES)
def test_tube_mesh(curve_type):
    out = model.generate_curve_model(POINTS, curve_type)
    assert out.n_points > 0
    assert out.n_cells > 0
    line = model.generate_curve_model(POINTS, curve_type, config.DEFAULT_CONFIG.replace(tube_radius=0))
    assert line.n_cells == 1
    assert line.n_points == len(model.curve_points(POINTS, curve_type))

def test_kochanek_uses_config():
    plain = model.curve_points(POINTS, 'kochanek_spline')
    biased = model.curve_points(POINTS, 'kochanek_spline', config.CurveConfig(kochanek_bias=0.5))
    assert not numpy.allclose(plain, biased)

def test_polynomial_minimum_spanning_tree_parameters():
    xs = [2, 0, 3, 1]
    points = numpy.array([[x, 0, 0] for x in xs], dtype=float)
    cfg = config.CurveConfig(segments_between_control_points=1)
    out = model.curve_points(points, config.CurveType.POLYNOMIAL, cfg,
        point_parameter_type=config.PointParameterType.MINIMUM_SPANNING_TREE)
    assert numpy.allclose(out, [[0, 0, 0], [1, 0, 0], [2, 0, 0], [3, 0, 0]], atol=1e-9)

def test_polynomial_explicit_parameters():
    points = numpy.array([[0, 0, 0], [1, 0, 0], [4, 0, 0]], dtype=float)
    cfg = config.CurveConfig(segments_between_control_points=2, polynomial_order=1, tube_radius=0)
    out = model.generate_polynomial_model(points, cfg, point_parameters=[0, 0.25, 1])
    assert numpy.allclose(out.points[:, 0], [0, 1, 2, 3, 4])

def test_polynomial_parameter_count_mismatch():
    with pytest.raises(errors.ParameterCountMismatchError):
        model.generate_polynomial_model(POINTS, point_parameters=[0, 0.5, 1])

def test_polynomial_degenerate_points():
    with pytest.raises(errors.DegenerateInputError):
        model.generate_polynomial_model(numpy.ones((4, 3)),
            point_parameter_type=config.PointParameterType.MINIMUM_SPANNING_TREE)

def test_polynomial_order_clamped():
    t = numpy.linspace(0, 1, 9)
    points = numpy.transpose([t, numpy.sin(t), t**2])
    with pytest.warns(errors.UnsupportedOrderWarning):
        out = model.generate_polynomial_model(points, config.CurveConfig(polynomial_order=10))
    assert out.n_points > 0

def test_null_control_points():
    with pytest.raises(errors.NullInputError):
        model.generate_curve_model(None, config.CurveType.LINEAR)
    with pytest.raises(ValueError):
        model.generate_curve_model(POINTS, 'not_a_curve')
