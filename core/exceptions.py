#!/usr/bin/env python3
"""
Domain exceptions for ATS Pro.

The HTTP layer maps these onto status codes in web/backend/exceptions.py.
"""


class AtsError(Exception):
    """Base exception for domain errors."""
    pass


class IOFailure(AtsError):
    """Local storage could not be read or written."""
    pass


class ValidationError(AtsError):
    """Malformed user input (bad email, short password, duplicate email)."""
    pass


class OracleFailure(AtsError):
    """The scoring oracle returned an empty, malformed or erroring response."""
    pass


class UnsupportedDocumentFormat(AtsError):
    """Document extension is not one of the supported formats."""
    pass


class DocumentParseError(AtsError):
    """Document was recognized but text could not be extracted."""
    pass


class ReportNotFound(AtsError):
    """Raised when a report id does not exist."""
    pass


class NotAuthenticated(AtsError):
    """No user is logged in."""
    pass


class Forbidden(AtsError):
    """Current user lacks the role for this operation."""
    pass
