"""Domain-level exceptions.

Every rule violation in the ordering core is a subclass of DomainException
so the presentation layer can catch them uniformly.  None of them is
transient: retrying the same call with the same input fails the same way.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A lookup or removal target does not exist."""


class CategoryMismatchError(ValidationError):
    """A catalog entry was used by an operation meant for another category."""


class InvalidBase(CategoryMismatchError):
    """Composition was started from an entry that is not a base."""


class InvalidAddon(CategoryMismatchError):
    """Only add-on entries can be stacked onto a composition."""


class InvalidSimpleItem(CategoryMismatchError):
    """Only beverages can be added to the cart without composition."""


class BaseImmutable(DomainException):
    """The base selection of a composition cannot be removed."""


class InvalidState(DomainException):
    """The operation is not legal in the current composition phase."""


class MissingCustomerName(ValidationError):
    """An order cannot be formatted without a customer name."""
