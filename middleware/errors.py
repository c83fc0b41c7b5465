"""
Centralized custom exception definitions for the Country Management Console.

Each exception inherits from BaseAppError, which itself extends Werkzeug's
HTTPException, allowing clean integration with Flask's error system and
JSON-formatted API responses.

Domain Groups:
--------------
1. Upstream API Errors (502)
2. System Errors (500)
"""

from werkzeug.exceptions import HTTPException


class BaseAppError(HTTPException):
    """Root application error, base for all custom exceptions."""
    code = 500
    description = "Application error"

    def __init__(self, message=None, details=None, code=None):
        super().__init__(description=message or self.description)
        self.message = message or self.description
        self.details = details or {}
        if code:
            self.code = code

    def to_dict(self):
        """Serialize error info into a JSON-safe dictionary."""
        return {
            "status": "error",
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


# ==============================================================================
# 1. UPSTREAM API ERRORS (HTTP 502)
# ==============================================================================

class TransportError(BaseAppError):
    """
    Raised when the Country API could not be reached or its reply could not
    be read as a response envelope. Server-reported failures (ifSuccess
    false) are not transport errors.
    """
    code = 502
    description = "Country API request failed"


class MalformedEnvelopeError(TransportError):
    description = "Country API returned an unreadable response envelope"


# ==============================================================================
# 2. SYSTEM ERRORS (HTTP 500)
# ==============================================================================

class ConfigurationError(BaseAppError):
    code = 500
    description = "Configuration missing or invalid"
