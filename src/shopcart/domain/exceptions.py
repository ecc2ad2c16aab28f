"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Cart mutators raise the quantity/stock errors internally and turn them into
a logged, rejected operation.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A zero or negative amount was requested."""


class InsufficientStockError(ValidationError):
    """More units were requested than the product has in stock."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product with the given id is known."""
