"""Custom exceptions for tea-lens."""


class TeaLensError(Exception):
    """Base exception for tea-lens."""

    pass


class TeaInputError(TeaLensError):
    """Raised when a tea record cannot be read or is invalid."""

    pass


class ReferenceDataError(TeaLensError):
    """Raised when packaged reference tables are inconsistent."""

    pass
