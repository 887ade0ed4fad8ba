"""Exceptions for the Foscam floodlight library."""


class FoscamError(Exception):
    """Base error for the floodlight library."""


class MalformedResponseError(FoscamError):
    """Raised when a CGI response cannot be parsed."""
