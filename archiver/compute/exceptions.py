class ComputeError(Exception):
    """Raised when the compute instance cannot be controlled."""
