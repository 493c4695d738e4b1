class InvalidArgument(ValueError):
    """Raised when a time grid, step size or rule selector is not usable."""
