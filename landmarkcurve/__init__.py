r'''
# landmarkcurve

Generate smooth 3D curves, and tube-shaped meshes around them, from a sparse
set of landmark (control) points.

 - config: the CurveConfig generation parameters and the CurveType and
   PointParameterType choices.
 - model: generate a curve mesh of a given CurveType through control points,
   handling inputs of zero, one, or two points uniformly.
 - mesh: build polyline, tube, and sphere meshes (pyvista.PolyData).
 - errors: exceptions and warnings for invalid inputs.
 - logging\_config: optional logging setup for applications.

Curve
-----
Functions for computations over 3D curves, represented as arrays of points of shape (n, 3).
 - curve.geometry: basic algorithms for point sets and polylines.
 - curve.parameterize: assign each point a position along the curve, from point indices or a minimum spanning tree.
 - curve.spline: cardinal and Kochanek-Bartels interpolating splines.
 - curve.polyfit: least-squares polynomial curve fitting.
 - curve.sample: sample linear, spline, and polynomial curves densely between control points.

'''
