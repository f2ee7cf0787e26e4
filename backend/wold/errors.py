"""Wake pipeline error taxonomy.

Every failure the pipeline can report is a ``WakeError`` subclass carrying a
stable ``kind`` string and the HTTP status it maps to.
"""

from __future__ import annotations


class WakeError(Exception):
    """Base class for all wake pipeline failures."""

    kind = "error"
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


# --- Request decoding ---


class MalformedBody(WakeError):
    """Request body is not valid JSON."""

    kind = "malformed_body"
    status_code = 400


class MissingOrInvalidField(WakeError):
    """Request body has no usable ``target`` string."""

    kind = "missing_or_invalid_field"
    status_code = 400


# --- Address codec ---


class AddressError(WakeError):
    status_code = 400


class MalformedFormat(AddressError):
    """Hardware address text fails the parsing rules."""

    kind = "malformed_format"


# --- Broadcast transmitter ---


class TransmitError(WakeError):
    status_code = 500


class SocketUnavailable(TransmitError):
    """UDP socket could not be created or prepared for broadcast."""

    kind = "socket_unavailable"


class SendFailed(TransmitError):
    """The datagram write failed."""

    kind = "send_failed"
