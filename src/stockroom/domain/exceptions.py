"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A submitted product record failed input validation."""


class EmptyTypeError(ValidationError):
    """The product type was left blank."""

    def __init__(self, message: str = "Please enter a product type.") -> None:
        super().__init__(message)


class InvalidQuantityError(ValidationError):
    """The quantity is not a positive integer."""

    def __init__(self, message: str = "Please enter a valid quantity.") -> None:
        super().__init__(message)


class InvalidPriceError(ValidationError):
    """The price per unit is not a positive number."""

    def __init__(self, message: str = "Please enter a valid price.") -> None:
        super().__init__(message)


class DeletionError(DomainException):
    """A delete-by-position request could not be honoured."""


class NotANumberError(DeletionError):
    """The position could not be parsed as a number."""

    def __init__(self, message: str = "Please enter a valid number.") -> None:
        super().__init__(message)


class OutOfRangeError(DeletionError):
    """The position does not address an existing record."""

    def __init__(self, message: str = "Invalid product ID.") -> None:
        super().__init__(message)


class PersistenceError(DomainException):
    """The backing file could not be written."""
