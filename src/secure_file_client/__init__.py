"""secure file client library."""

from .client import SecureFileClient
from .exceptions import (
    LocalIOError,
    MalformedResponseError,
    SecureFileError,
    SecureFileErrorCodes,
    TransportError,
    UnexpectedStatusError,
)
from .http_client import SecureFileTransfer
from .memory import InMemorySecureFileClient
from .models import SecureFileConfig, SecureFilesResponse, SecureFileSummary
from .transport import HttpxTransport, Transport

__all__ = [
    "SecureFileClient",
    "SecureFileTransfer",
    "InMemorySecureFileClient",
    "Transport",
    "HttpxTransport",
    "SecureFileConfig",
    "SecureFileSummary",
    "SecureFilesResponse",
    "SecureFileError",
    "SecureFileErrorCodes",
    "TransportError",
    "UnexpectedStatusError",
    "MalformedResponseError",
    "LocalIOError",
]
