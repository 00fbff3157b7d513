"""Domain-level exceptions.

Every input the customer can get wrong is expressed as a subclass of
DomainException so the CLI layer can catch them uniformly, print the
message and ask again.

CatalogIntegrityError deliberately sits outside that hierarchy: a broken
catalog is not something the customer can fix by retyping, so it must
abort the run instead of being swallowed by a retry loop.
"""


class DomainException(Exception):
    """Base class for all recoverable domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class MalformedInputError(ValidationError):
    """Order text does not follow the ``[name-quantity],...`` format."""


class InvalidQuantityError(ValidationError):
    """A quantity field is not a positive integer."""


class OutOfStockError(ValidationError):
    """Every catalog row for the product is depleted."""


class InsufficientStockError(ValidationError):
    """The requested quantity exceeds the remaining stock."""


class InvalidAnswerError(ValidationError):
    """A yes/no prompt received something other than Y or N."""


class UnknownProductError(EntityNotFoundError):
    """The product is not sold at this store."""


class CatalogIntegrityError(Exception):
    """The product or promotion catalog is inconsistent (fatal)."""
