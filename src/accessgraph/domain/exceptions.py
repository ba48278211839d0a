"""Domain exceptions."""


class AccessGraphError(Exception):
    """Base exception for AccessGraph."""

    pass


class ConfigurationError(AccessGraphError):
    """Action code is not registered - a caller/registry mismatch, not a security event."""

    def __init__(self, action_code: str) -> None:
        super().__init__(f"Action type not found: {action_code}")
        self.action_code = action_code


class StoreUnavailable(AccessGraphError):
    """Underlying data store could not be queried. Distinct from a deny."""

    pass


class ValidationError(AccessGraphError):
    """Validation failed for input data."""

    pass
