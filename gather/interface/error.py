"""Errors raised while resolving the caller of an HTTP request."""


class InterfaceError(Exception):
    """Request could not be turned into a domain call."""


class AuthenticationError(InterfaceError):
    """Neither a Bearer header nor a session cookie carried a valid token."""
