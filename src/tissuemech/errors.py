"""Exceptions raised by tissuemech."""


class TissueMechError(Exception):
    """Base class for tissuemech errors."""


class GeometryDegenerateError(TissueMechError, ArithmeticError):
    """A force or angle computation did not produce a finite real value.

    This is raised when an inverse trigonometric function receives an
    argument outside its domain or when a computed force vector contains
    NaN or infinite components. No forces are applied for the call
    that raised it.
    """
