'''
Curve
-----
Functions for computations over 3D curves, represented as arrays of points of shape (n, 3).
 - curve.geometry: basic algorithms for point sets and polylines.
 - curve.parameterize: assign each point a position along the curve, from point indices or a minimum spanning tree.
 - curve.spline: cardinal and Kochanek-Bartels interpolating splines (using scipy.interpolate for the cardinal splines).
 - curve.polyfit: least-squares polynomial curve fitting.
 - curve.sample: sample linear, spline, and polynomial curves densely between control points.
 '''
