"""
Error types for a single prompt/response cycle.

Every error carries a kind tag and structured context so callers can branch
on what failed rather than on message text. All of them are terminal.
"""
from enum import Enum


class ErrorKind(str, Enum):
    ARGUMENT = "argument"
    FILE = "file"
    ENVIRONMENT = "environment"
    NETWORK = "network"
    API = "api"
    READ = "read"
    PARSE = "parse"
    EMPTY_RESPONSE = "empty_response"


class CoztrailError(Exception):
    """Base class for every failure of an invocation."""

    kind: ErrorKind

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.context = context


class ArgumentError(CoztrailError):
    kind = ErrorKind.ARGUMENT


class FileError(CoztrailError):
    """Prompt or template unreadable, or the program location unresolved."""

    kind = ErrorKind.FILE


class ApiKeyMissingError(CoztrailError):
    kind = ErrorKind.ENVIRONMENT


class NetworkError(CoztrailError):
    kind = ErrorKind.NETWORK


class APIError(CoztrailError):
    """Non-success HTTP status; keeps the status code and raw body."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"API request failed with status {status_code}: {body}",
            status_code=status_code,
            body=body,
        )
        self.status_code = status_code
        self.body = body


class ReadError(CoztrailError):
    kind = ErrorKind.READ


class ParseError(CoztrailError):
    kind = ErrorKind.PARSE


class EmptyResponseError(CoztrailError):
    kind = ErrorKind.EMPTY_RESPONSE
