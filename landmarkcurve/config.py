"""Generation parameters for curve models.

A single immutable CurveConfig carries every setting used by the samplers and
the mesh builder. Construct one (or use DEFAULT_CONFIG) and pass it explicitly
to the generation functions in landmarkcurve.model.
"""
import dataclasses
import enum

# Higher-order global polynomial fits are too poorly conditioned to be useful.
MAXIMUM_POLYNOMIAL_ORDER = 6


class CurveType(str, enum.Enum):
    LINEAR = 'linear'
    CARDINAL_SPLINE = 'cardinal_spline'
    KOCHANEK_SPLINE = 'kochanek_spline'
    POLYNOMIAL = 'polynomial'


class PointParameterType(str, enum.Enum):
    """How input points are assigned a position along the curve for fitting."""
    RAW_INDICES = 'raw_indices'
    MINIMUM_SPANNING_TREE = 'minimum_spanning_tree'


@dataclasses.dataclass(frozen=True)
class CurveConfig:
    """Parameters for curve generation.

    Attributes:
        tube_loop: if True, the curve closes back on its first point.
        tube_radius: radius of the extruded tube. 0 produces a bare polyline.
        tube_number_of_sides: number of sides of the tube cross-section (also
            the resolution of the sphere generated for a single point).
        segments_between_control_points: number of curve samples generated
            for each interval between control points.
        polynomial_order: order of the polynomial for fitted curves. Orders
            above MAXIMUM_POLYNOMIAL_ORDER are clamped when the fit is made;
            negative orders are rejected with ValueError, not clamped to 0.
        kochanek_bias, kochanek_continuity, kochanek_tension: shape
            parameters applied to every Kochanek-Bartels spline node.
        kochanek_ends_copy_nearest_derivatives: if True, the end tangents of
            Kochanek splines are set explicitly to the difference between the
            two nearest control points on each end.
    """
    tube_loop: bool = False
    tube_radius: float = 1.0
    tube_number_of_sides: int = 8
    segments_between_control_points: int = 5
    polynomial_order: int = 3
    kochanek_bias: float = 0.0
    kochanek_continuity: float = 0.0
    kochanek_tension: float = 0.0
    kochanek_ends_copy_nearest_derivatives: bool = False

    def __post_init__(self):
        if self.tube_radius < 0:
            raise ValueError(f'tube_radius must be >= 0, not {self.tube_radius}.')
        if self.tube_number_of_sides < 3:
            raise ValueError(f'tube_number_of_sides must be >= 3, not {self.tube_number_of_sides}.')
        if self.segments_between_control_points < 1:
            raise ValueError(f'segments_between_control_points must be >= 1, not {self.segments_between_control_points}.')
        if self.polynomial_order < 0:
            raise ValueError(f'polynomial_order must be >= 0, not {self.polynomial_order}.')

    def replace(self, **changes):
        """Return a copy of this configuration with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = CurveConfig()
