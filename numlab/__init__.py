"""Numerical methods: linear systems, eigenvalues, nonlinear equations, interpolation, splines,
least squares, differentiation and integration, with a small command-line front end."""

__version__ = "0.1.0"