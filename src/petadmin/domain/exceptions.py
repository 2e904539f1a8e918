"""Domain-level exceptions.

All failures the admin tool reports to a user are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.

Note that view-state problems (unknown sort key, out-of-range page) are
*not* errors: the pipeline and paginator degrade to permissive defaults.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ApiError(DomainException):
    """The backend collaborator failed to carry out a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
