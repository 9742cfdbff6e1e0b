"""Domain error types shared by entities, repositories and the UI layers."""


class ValidationError(ValueError):
    """Raised when an entity is constructed or updated with malformed input."""


class PersistenceError(Exception):
    """Raised when saving, loading or exporting data fails."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
