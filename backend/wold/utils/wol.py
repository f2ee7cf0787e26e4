"""Wake-on-LAN (WOL) magic packet encoding and UDP broadcast."""

from __future__ import annotations

import logging
import socket

from wold.errors import SendFailed, SocketUnavailable
from wold.utils.mac import HardwareAddress
from wold.utils.net import SocketAddress

logger = logging.getLogger(__name__)

SYNC_STREAM = b"\xff" * 6
REPETITIONS = 16
PACKET_SIZE = len(SYNC_STREAM) + 6 * REPETITIONS  # 102

DEFAULT_DESTINATION = SocketAddress("255.255.255.255", 9)


def build_magic_packet(mac: HardwareAddress) -> bytes:
    """Magic packet: 6x 0xFF + 16x MAC address."""
    return SYNC_STREAM + bytes(mac) * REPETITIONS


def send_magic_packet(
    packet: bytes,
    destination: SocketAddress = DEFAULT_DESTINATION,
    source: str | None = None,
) -> int:
    """
    Send ``packet`` to ``destination`` as a single broadcast datagram.

    Args:
        packet: Encoded magic packet
        destination: Broadcast address and port (default: 255.255.255.255:9)
        source: Optional local interface address to send from

    Returns:
        Number of bytes sent.

    Raises:
        SocketUnavailable: socket creation, SO_BROADCAST or bind failed
        SendFailed: the datagram could not be written
    """
    try:
        sock = socket.socket(destination.family, socket.SOCK_DGRAM)
    except OSError as e:
        logger.warning("Cannot create UDP socket: %s", e)
        raise SocketUnavailable(f"Cannot create UDP socket: {e}") from e

    with sock:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            if source:
                sock.bind((source, 0))
        except OSError as e:
            logger.warning("Cannot prepare broadcast socket (source=%s): %s", source, e)
            raise SocketUnavailable(f"Cannot prepare broadcast socket: {e}") from e

        try:
            sent = sock.sendto(packet, (destination.host, destination.port))
        except OSError as e:
            logger.warning("Failed to send magic packet to %s: %s", destination, e)
            raise SendFailed(f"Failed to send magic packet to {destination}: {e}") from e

    if sent != len(packet):
        raise SendFailed(f"Short write to {destination}: {sent} of {len(packet)} bytes")

    logger.info("Magic packet sent to %s (%d bytes)", destination, sent)
    return sent

