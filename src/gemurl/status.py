"""Human-readable descriptions of Gemini response status codes.

Server status codes are the two-digit codes defined by the Gemini protocol.
Negative codes are client-side conditions (bad redirects, unsupported
content, TLS failures) reported through the same lookup.
"""

from dataclasses import dataclass
from enum import IntEnum


class GemStatus(IntEnum):
    """Gemini status codes plus client-side failure codes."""

    # Client-side conditions
    UNKNOWN_STATUS_CODE = -100
    FAILED_TO_OPEN_FILE = -99
    INVALID_LOCAL_RESOURCE = -98
    UNSUPPORTED_MIME_TYPE = -97
    UNSUPPORTED_PROTOCOL = -96
    INVALID_HEADER = -95
    INVALID_REDIRECT = -94
    SCHEME_CHANGE_REDIRECT = -93
    TOO_MANY_REDIRECTS = -92
    TLS_FAILURE = -91

    NONE = 0

    INPUT = 10
    SENSITIVE_INPUT = 11
    SUCCESS = 20
    REDIRECT_TEMPORARY = 30
    REDIRECT_PERMANENT = 31
    TEMPORARY_FAILURE = 40
    SERVER_UNAVAILABLE = 41
    CGI_ERROR = 42
    PROXY_ERROR = 43
    SLOW_DOWN = 44
    PERMANENT_FAILURE = 50
    NOT_FOUND = 51
    GONE = 52
    PROXY_REQUEST_REFUSED = 53
    BAD_REQUEST = 59
    CLIENT_CERTIFICATE_REQUIRED = 60
    CERTIFICATE_NOT_AUTHORIZED = 61
    CERTIFICATE_NOT_VALID = 62


@dataclass(frozen=True)
class StatusInfo:
    """Display information for a status code.

    Attributes:
        icon: Unicode code point of an icon, or 0 for none
        title: Short title
        message: Explanation shown to the user
    """
    icon: int
    title: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "icon": chr(self.icon) if self.icon else "",
            "title": self.title,
            "message": self.message,
        }


_NO_STATUS = StatusInfo(0, "", "")

_STATUS_TABLE: dict[GemStatus, StatusInfo] = {
    GemStatus.UNKNOWN_STATUS_CODE: StatusInfo(
        0x1F4AB,  # dizzy
        "Unknown Status Code",
        "The server responded with a status code that is not in the Gemini specification. "
        "Maybe the server is from the future? Or just malfunctioning.",
    ),
    GemStatus.FAILED_TO_OPEN_FILE: StatusInfo(
        0x1F4C1,  # file folder
        "Failed to Open File",
        "The requested file does not exist or is inaccessible. "
        "Please check the file path.",
    ),
    GemStatus.INVALID_LOCAL_RESOURCE: StatusInfo(
        0,
        "Invalid Resource",
        "The requested resource does not exist.",
    ),
    GemStatus.UNSUPPORTED_MIME_TYPE: StatusInfo(
        0x1F47D,  # alien
        "Unsupported Content Type",
        "The received content cannot be viewed with this application.",
    ),
    GemStatus.UNSUPPORTED_PROTOCOL: StatusInfo(
        0x1F61E,  # disappointed
        "Unsupported Protocol",
        "The requested protocol is not supported by this application.",
    ),
    GemStatus.INVALID_HEADER: StatusInfo(
        0x1F4A9,  # pile of poo
        "Invalid Header",
        "The received header did not conform to the Gemini specification. "
        "Perhaps the server is malfunctioning or you tried to contact a "
        "non-Gemini server.",
    ),
    GemStatus.INVALID_REDIRECT: StatusInfo(
        0x27A0,  # dashed arrow
        "Invalid Redirect",
        "The server responded with a redirect but did not provide a valid destination URL. "
        "Perhaps the server is malfunctioning.",
    ),
    GemStatus.SCHEME_CHANGE_REDIRECT: StatusInfo(
        0x27A0,
        "Scheme-Changing Redirect",
        "The server attempted to redirect us to a URL whose scheme is different than the "
        "originating URL's scheme. Here is the link so you can open it manually if appropriate.",
    ),
    GemStatus.TOO_MANY_REDIRECTS: StatusInfo(
        0x27A0,
        "Too Many Redirects",
        "You may be stuck in a redirection loop. The next redirected URL is below if you "
        "want to continue manually.",
    ),
    GemStatus.TLS_FAILURE: StatusInfo(
        0x1F5A7,  # networked computers
        "Network/TLS Failure",
        "Failed to communicate with the host. Here is the error message:",
    ),
    GemStatus.TEMPORARY_FAILURE: StatusInfo(
        0x1F50C,  # electric plug
        "Temporary Failure",
        "The request has failed, but may succeed if you try again in the future.",
    ),
    GemStatus.SERVER_UNAVAILABLE: StatusInfo(
        0x1F525,  # fire
        "Server Unavailable",
        "The server is unavailable due to overload or maintenance. Check back later.",
    ),
    GemStatus.CGI_ERROR: StatusInfo(
        0x1F4A5,  # collision
        "CGI Error",
        "Failure during dynamic content generation on the server. This may be due "
        "to buggy serverside software.",
    ),
    GemStatus.PROXY_ERROR: StatusInfo(
        0x1F310,  # globe
        "Proxy Error",
        "A proxy request failed because the server was unable to successfully "
        "complete a transaction with the remote host. Perhaps there are difficulties "
        "with network connectivity.",
    ),
    GemStatus.SLOW_DOWN: StatusInfo(
        0x1F40C,  # snail
        "Slow Down",
        "The server is rate limiting requests. Please wait...",
    ),
    GemStatus.PERMANENT_FAILURE: StatusInfo(
        0x1F6AB,  # no entry
        "Permanent Failure",
        "Your request has failed and will fail in the future as well if repeated.",
    ),
    GemStatus.NOT_FOUND: StatusInfo(
        0x1F50D,  # magnifying glass
        "Not Found",
        "The requested resource could not be found at this time.",
    ),
    GemStatus.GONE: StatusInfo(
        0x1F47B,  # ghost
        "Gone",
        "The resource requested is no longer available and will not be available again.",
    ),
    GemStatus.PROXY_REQUEST_REFUSED: StatusInfo(
        0x1F6C2,  # passport control
        "Proxy Request Refused",
        "The request was for a resource at a domain not served by the server and the "
        "server does not accept proxy requests.",
    ),
    GemStatus.BAD_REQUEST: StatusInfo(
        0x1F44E,  # thumbs down
        "Bad Request",
        "The server was unable to parse your request, presumably due to the "
        "request being malformed.",
    ),
    GemStatus.CLIENT_CERTIFICATE_REQUIRED: StatusInfo(
        0x1F511,  # key
        "Certificate Required",
        "Access to the requested resource requires identification via "
        "a client certificate.",
    ),
    GemStatus.CERTIFICATE_NOT_AUTHORIZED: StatusInfo(
        0x1F512,  # lock
        "Certificate Not Authorized",
        "The provided client certificate is valid but is not authorized for accessing "
        "the requested resource. ",
    ),
    GemStatus.CERTIFICATE_NOT_VALID: StatusInfo(
        0x1F6A8,  # revolving light
        "Invalid Certificate",
        "The provided client certificate is expired or invalid.",
    ),
}


def is_defined_status(code: int) -> bool:
    """Check whether code has its own entry in the status table."""
    return code in _STATUS_TABLE


def describe_status(code: int) -> StatusInfo:
    """Look up display information for a status code.

    Args:
        code: Gemini status code or client-side GemStatus value

    Returns:
        An empty StatusInfo for 0, the matching entry for known codes, and
        the "Unknown Status Code" entry for anything else

    Example:
        >>> describe_status(51).title
        'Not Found'
        >>> describe_status(99).title
        'Unknown Status Code'
    """
    if code == GemStatus.NONE:
        return _NO_STATUS
    return _STATUS_TABLE.get(code, _STATUS_TABLE[GemStatus.UNKNOWN_STATUS_CODE])
