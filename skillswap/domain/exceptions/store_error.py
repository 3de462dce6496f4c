"""
Document store domain exceptions.
"""


class StoreError(Exception):
    """Raised when the document store cannot complete an operation."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"Store operation '{operation}' failed: {message}")
