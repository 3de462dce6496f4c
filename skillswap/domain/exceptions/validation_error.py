"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name[:1].upper()}{field_name[1:]} is required")


class InvalidIdentifierError(ValidationError):
    """Raised when a record identifier is not a valid ObjectId."""

    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid {field_name}: '{value}'")
