"""Errors raised by domain services.

The API layer maps these to status codes: ``NotFoundError`` to 404,
``ForbiddenError`` to 403 and everything else to 400.
"""


class DomainError(Exception):
    """A domain rule rejected the operation."""


class ValidationError(DomainError):
    """Input is well-formed but breaks a rule, e.g. an event ending before it starts."""


class ForbiddenError(DomainError):
    """The viewer does not own the event or invitation being changed."""

    def __init__(self, message: str = "You do not have access to this resource."):
        super().__init__(message)


class NotFoundError(DomainError):
    """No event, invitation or profile exists under the given identifier."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
