"""Hardware (MAC / EUI-48) address parsing."""

from __future__ import annotations

from collections.abc import Iterable

from wold.errors import MalformedFormat

OCTETS = 6
DELIMITERS = (":", "-")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
# "xx:xx:xx:xx:xx:xx"
_TEXT_LENGTH = OCTETS * 2 + OCTETS - 1


class HardwareAddress(bytes):
    """Immutable 6-byte hardware address."""

    def __new__(cls, value: Iterable[int]):
        raw = bytes(value)
        if len(raw) != OCTETS:
            raise ValueError(f"Hardware address must be {OCTETS} bytes, got {len(raw)}")
        return super().__new__(cls, raw)

    def __str__(self) -> str:
        return self.hex(":")

    def __repr__(self) -> str:
        return f"HardwareAddress('{self}')"


def parse_mac(text: str) -> HardwareAddress:
    """Parse ``AA:BB:CC:DD:EE:FF`` or ``AA-BB-CC-DD-EE-FF`` into 6 bytes.

    The delimiter must be the same throughout, each octet exactly two hex
    digits (either case). Surrounding whitespace is not stripped.

    Raises:
        MalformedFormat: if ``text`` is not a well-formed address.
    """
    if not isinstance(text, str):
        raise MalformedFormat(f"Hardware address must be a string, got {type(text).__name__}")
    if not text:
        raise MalformedFormat("Hardware address is empty")
    if len(text) != _TEXT_LENGTH:
        raise MalformedFormat(
            f"Invalid hardware address {text!r}: expected {_TEXT_LENGTH} characters "
            f"(6 octets like 'aa:bb:cc:dd:ee:ff'), got {len(text)}"
        )

    delimiter = text[2]
    if delimiter not in DELIMITERS:
        raise MalformedFormat(
            f"Invalid hardware address {text!r}: octets must be separated by ':' or '-'"
        )

    octets = text.split(delimiter)
    if len(octets) != OCTETS:
        raise MalformedFormat(
            f"Invalid hardware address {text!r}: expected {OCTETS} octets with one consistent delimiter"
        )

    for position, octet in enumerate(octets, start=1):
        if len(octet) != 2 or not _HEX_DIGITS.issuperset(octet):
            raise MalformedFormat(
                f"Invalid hardware address {text!r}: octet {position} ({octet!r}) "
                "is not two hex digits"
            )

    return HardwareAddress(int(octet, 16) for octet in octets)
