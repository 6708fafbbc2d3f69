"""Transport error taxonomy and the user-facing text for each kind."""

from enum import StrEnum


class ErrorKind(StrEnum):
    BAD_URL = "bad_url"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    DECODING_ERROR = "decoding_error"
    UNKNOWN = "unknown"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.BAD_URL: "The URL provided was invalid. Please try again.",
    ErrorKind.UNAUTHORIZED: (
        "You are not authorized to perform this action. "
        "Please check your credentials."
    ),
    ErrorKind.NOT_FOUND: (
        "The requested resource could not be found. "
        "Please try a different search."
    ),
    ErrorKind.SERVER_ERROR: "The server encountered an error. Please try again later.",
    ErrorKind.DECODING_ERROR: (
        "We encountered an issue while processing the data. "
        "Please try again later."
    ),
    ErrorKind.UNKNOWN: "An unknown error occurred. Please try again.",
}


class NetworkError(Exception):
    """Raised by the transport and decoders; carries one ErrorKind."""

    def __init__(
        self, kind: ErrorKind, detail: str = "", status_code: int | None = None
    ):
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail
        self.status_code = status_code

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]


def kind_for_status(status_code: int) -> ErrorKind | None:
    """Map an HTTP status to an ErrorKind. Returns None for 2xx."""
    if 200 <= status_code <= 299:
        return None
    if status_code == 401:
        return ErrorKind.UNAUTHORIZED
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    if 500 <= status_code <= 599:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.UNKNOWN


def user_message(exc: BaseException) -> str:
    if isinstance(exc, NetworkError):
        return exc.message
    return f"An unexpected error occurred: {exc}"
