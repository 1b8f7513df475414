"""
colorkey/core/errors
~~~~~~~~~~~~~~~~~~~~
"""


class ConfigurationError(ValueError):
    """
    Raised when a colorbar or gradient is configured with invalid parameters.
    """


class LengthMismatchError(ValueError):
    """
    Raised when tick fractions and tick labels differ in length.
    """


class ResourceError(RuntimeError):
    """
    Raised when a drawing surface cannot be acquired or has already been released.
    """
