"""
HttpError — an exception carrying an HTTP status code, plus the status table.

HttpErrorCode is the flat table of 4xx/5xx statuses with their default
reason phrases. HttpError has one factory per table entry, so callers never
spell out a number:

    raise HttpError.not_found("Launch 42 does not exist")
    HttpError.too_many_requests().status_code          # → 429

and three generic builders:

    HttpError.from_message("Boom", 502)                # explicit message + status
    HttpError.from_error(ValueError("bad id"), 400)    # reuse another error's message
    HttpError.cast(error)                              # same instance if already HttpError, else 500

cast() is the natural failure mapper for a Try/AsyncTry chain:

    AsyncTry.of(fetch_launch).map_failure(HttpError.cast)
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class HttpErrorCode(Enum):
    """
    Client (4xx) and server (5xx) error statuses with their default messages.

    >>> HttpErrorCode.NOT_FOUND.code
    404
    >>> HttpErrorCode.NOT_FOUND.message
    'Not Found'
    """

    # --- Client-side errors (4xx) ---
    BAD_REQUEST = (400, "Bad Request")
    UNAUTHORIZED = (401, "Unauthorized")
    PAYMENT_REQUIRED = (402, "Payment Required")
    FORBIDDEN = (403, "Forbidden")
    NOT_FOUND = (404, "Not Found")
    METHOD_NOT_ALLOWED = (405, "Method Not Allowed")
    NOT_ACCEPTABLE = (406, "Not Acceptable")
    PROXY_AUTHENTICATION_REQUIRED = (407, "Proxy Authentication Required")
    REQUEST_TIMEOUT = (408, "Request Timeout")
    CONFLICT = (409, "Conflict")
    GONE = (410, "Gone")
    LENGTH_REQUIRED = (411, "Length Required")
    PRECONDITION_FAILED = (412, "Precondition Failed")
    PAYLOAD_TOO_LARGE = (413, "Payload Too Large")
    URI_TOO_LONG = (414, "URI Too Long")
    UNSUPPORTED_MEDIA_TYPE = (415, "Unsupported Media Type")
    RANGE_NOT_SATISFIABLE = (416, "Range Not Satisfiable")
    EXPECTATION_FAILED = (417, "Expectation Failed")
    I_AM_A_TEAPOT = (418, "I'm a teapot")
    MISDIRECTED_REQUEST = (421, "Misdirected Request")
    UNPROCESSABLE_ENTITY = (422, "Unprocessable Entity")
    LOCKED = (423, "Locked")
    FAILED_DEPENDENCY = (424, "Failed Dependency")
    TOO_EARLY = (425, "Too Early")
    UPGRADE_REQUIRED = (426, "Upgrade Required")
    PRECONDITION_REQUIRED = (428, "Precondition Required")
    TOO_MANY_REQUESTS = (429, "Too Many Requests")
    REQUEST_HEADER_FIELDS_TOO_LARGE = (431, "Request Header Fields Too Large")
    UNAVAILABLE_FOR_LEGAL_REASONS = (451, "Unavailable For Legal Reasons")

    # --- Server-side errors (5xx) ---
    INTERNAL_SERVER_ERROR = (500, "Internal Server Error")
    NOT_IMPLEMENTED = (501, "Not Implemented")
    BAD_GATEWAY = (502, "Bad Gateway")
    SERVICE_UNAVAILABLE = (503, "Service Unavailable")
    GATEWAY_TIMEOUT = (504, "Gateway Timeout")
    HTTP_VERSION_NOT_SUPPORTED = (505, "HTTP Version Not Supported")
    VARIANT_ALSO_NEGOTIATES = (506, "Variant Also Negotiates")
    INSUFFICIENT_STORAGE = (507, "Insufficient Storage")
    LOOP_DETECTED = (508, "Loop Detected")
    NOT_EXTENDED = (510, "Not Extended")
    NETWORK_AUTHENTICATION_REQUIRED = (511, "Network Authentication Required")

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.code < 600

    @classmethod
    def lookup(cls, status_code: int) -> HttpErrorCode | None:
        """Find the table entry for a numeric status, or None if it isn't listed."""
        return _BY_STATUS.get(status_code)


_BY_STATUS: dict[int, HttpErrorCode] = {entry.code: entry for entry in HttpErrorCode}


class HttpError(Exception):
    """
    An error that knows which HTTP status it maps to.

    >>> error = HttpError.from_message("Not Found", 404)
    >>> error.status_code, error.message
    (404, 'Not Found')
    """

    def __init__(
        self,
        message: str = HttpErrorCode.INTERNAL_SERVER_ERROR.message,
        status_code: int = HttpErrorCode.INTERNAL_SERVER_ERROR.code,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    def __repr__(self) -> str:
        return f"HttpError({self.status_code}, {self.message!r})"

    # ──────────────────────── Generic builders ────────────────────────

    @classmethod
    def from_message(
        cls,
        message: str = HttpErrorCode.INTERNAL_SERVER_ERROR.message,
        status_code: int = HttpErrorCode.INTERNAL_SERVER_ERROR.code,
    ) -> HttpError:
        """Create an HttpError from a message and a status code (default: 500)."""
        return cls(message, status_code)

    @classmethod
    def from_error(cls, error: BaseException, status_code: int = 500) -> HttpError:
        """Create a NEW HttpError carrying another error's message."""
        return cls.from_message(str(error), status_code)

    @classmethod
    def from_status(cls, status_code: int, message: str | None = None) -> HttpError:
        """
        Create an HttpError for a numeric status, defaulting the message from the table.

            HttpError.from_status(response.status_code)
        """
        if message is None:
            entry = HttpErrorCode.lookup(status_code)
            message = entry.message if entry is not None else f"HTTP {status_code}"
        return cls.from_message(message, status_code)

    @classmethod
    def cast(cls, error: BaseException) -> HttpError:
        """
        Return error itself if it already is an HttpError, otherwise wrap it with status 500.
        """
        if isinstance(error, HttpError):
            return error
        return cls.from_error(error, 500)

    @classmethod
    def _build(cls, entry: HttpErrorCode, message: str | None) -> HttpError:
        return cls.from_message(entry.message if message is None else message, entry.code)

    # ──────────────────────── One factory per status ────────────────────────

    @classmethod
    def bad_request(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.UNAUTHORIZED, message)

    @classmethod
    def payment_required(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.PAYMENT_REQUIRED, message)

    @classmethod
    def forbidden(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.FORBIDDEN, message)

    @classmethod
    def not_found(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.NOT_FOUND, message)

    @classmethod
    def method_not_allowed(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.METHOD_NOT_ALLOWED, message)

    @classmethod
    def not_acceptable(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.NOT_ACCEPTABLE, message)

    @classmethod
    def proxy_authentication_required(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.PROXY_AUTHENTICATION_REQUIRED, message)

    @classmethod
    def request_timeout(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.REQUEST_TIMEOUT, message)

    @classmethod
    def conflict(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.CONFLICT, message)

    @classmethod
    def gone(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.GONE, message)

    @classmethod
    def length_required(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.LENGTH_REQUIRED, message)

    @classmethod
    def precondition_failed(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.PRECONDITION_FAILED, message)

    @classmethod
    def payload_too_large(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.PAYLOAD_TOO_LARGE, message)

    @classmethod
    def uri_too_long(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.URI_TOO_LONG, message)

    @classmethod
    def unsupported_media_type(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.UNSUPPORTED_MEDIA_TYPE, message)

    @classmethod
    def range_not_satisfiable(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.RANGE_NOT_SATISFIABLE, message)

    @classmethod
    def expectation_failed(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.EXPECTATION_FAILED, message)

    @classmethod
    def im_a_teapot(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.I_AM_A_TEAPOT, message)

    @classmethod
    def misdirected_request(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.MISDIRECTED_REQUEST, message)

    @classmethod
    def unprocessable_entity(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.UNPROCESSABLE_ENTITY, message)

    @classmethod
    def locked(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.LOCKED, message)

    @classmethod
    def failed_dependency(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.FAILED_DEPENDENCY, message)

    @classmethod
    def too_early(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.TOO_EARLY, message)

    @classmethod
    def upgrade_required(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.UPGRADE_REQUIRED, message)

    @classmethod
    def precondition_required(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.PRECONDITION_REQUIRED, message)

    @classmethod
    def too_many_requests(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.TOO_MANY_REQUESTS, message)

    @classmethod
    def request_header_fields_too_large(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.REQUEST_HEADER_FIELDS_TOO_LARGE, message)

    @classmethod
    def unavailable_for_legal_reasons(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.UNAVAILABLE_FOR_LEGAL_REASONS, message)

    @classmethod
    def internal_server_error(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.INTERNAL_SERVER_ERROR, message)

    @classmethod
    def not_implemented(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.NOT_IMPLEMENTED, message)

    @classmethod
    def bad_gateway(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.BAD_GATEWAY, message)

    @classmethod
    def service_unavailable(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.SERVICE_UNAVAILABLE, message)

    @classmethod
    def gateway_timeout(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.GATEWAY_TIMEOUT, message)

    @classmethod
    def http_version_not_supported(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.HTTP_VERSION_NOT_SUPPORTED, message)

    @classmethod
    def variant_also_negotiates(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.VARIANT_ALSO_NEGOTIATES, message)

    @classmethod
    def insufficient_storage(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.INSUFFICIENT_STORAGE, message)

    @classmethod
    def loop_detected(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.LOOP_DETECTED, message)

    @classmethod
    def not_extended(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.NOT_EXTENDED, message)

    @classmethod
    def network_authentication_required(cls, message: str | None = None) -> HttpError:
        return cls._build(HttpErrorCode.NETWORK_AUTHENTICATION_REQUIRED, message)
