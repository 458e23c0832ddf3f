"""Custom exception classes."""


class RecipeBackendException(Exception):
    """Base exception for the recipe backend."""

    pass


class ValidationError(RecipeBackendException):
    """Raised when a recipe payload fails validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
