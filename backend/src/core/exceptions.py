"""Domain errors raised below the HTTP layer and mapped to responses by the routers."""


class StoreError(Exception):
    """A database statement or transaction failed."""


class StatementTimeoutError(StoreError):
    """A statement did not finish within the statement timeout."""


class ConstraintViolationError(StoreError):
    """A statement violated a unique, not-null or foreign-key constraint."""


class CategoryExistsError(Exception):
    """Raised when a category name collides with an existing one."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Category already exists: {name}")


class RenderError(Exception):
    """Template execution failed."""
