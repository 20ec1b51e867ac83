# aeplib/exceptions.py
from typing import Any, Dict, Optional


class AEPLibError(Exception):
    """Base exception for aeplib operations"""
    pass


class MissingParameterError(AEPLibError):
    """Raised when a path placeholder has no value in the parameter map"""

    def __init__(self, message: str, parameter: str = None):
        super().__init__(message)
        self.parameter = parameter


class MissingIdError(AEPLibError):
    """Raised when a user-settable create is missing the id field"""
    pass


class NoValidListKeyError(AEPLibError):
    """Raised when a list response has no array under any known envelope key"""
    pass


class TransportError(AEPLibError):
    """Raised when the server answers with a non-2xx response"""

    def __init__(self, message: str, *, response: Any = None, request: Optional[Dict] = None):
        super().__init__(message)
        self.response = response
        self.request = request

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)


class APIError(AEPLibError):
    """Raised when a decoded response body carries an error field"""

    def __init__(self, message: str, error: Any = None):
        super().__init__(message)
        self.error = error
