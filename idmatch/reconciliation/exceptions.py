class ReconciliationError(Exception):
    """Base exception for reconciliation errors."""


class DeclaredFieldsValidationError(ReconciliationError):
    """Raised when declared fields fail structural validation before reconciliation."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        details = "; ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid declared fields: {details}")
