# aeplib/__init__.py
from .api import (
    API,
    Contact,
    CreateMethod,
    CustomMethod,
    DeleteMethod,
    GetMethod,
    ListMethod,
    PatternInfo,
    Resource,
    UpdateMethod,
)
from .client import Client, ClientConfig, check_errors
from .exceptions import (
    AEPLibError,
    APIError,
    MissingIdError,
    MissingParameterError,
    NoValidListKeyError,
    TransportError,
)
from .logger import configure_logging, logger
from .paths import base_path

__version__ = "0.1.0"
__all__ = [
    "API", "Contact", "CreateMethod", "CustomMethod", "DeleteMethod", "GetMethod",
    "ListMethod", "PatternInfo", "Resource", "UpdateMethod",
    "Client", "ClientConfig", "check_errors", "base_path",
    "AEPLibError", "APIError", "MissingIdError", "MissingParameterError",
    "NoValidListKeyError", "TransportError",
    "configure_logging", "logger",
]
