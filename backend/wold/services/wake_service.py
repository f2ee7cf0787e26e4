"""Wake request handling: decode, parse, build, broadcast."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from wold.errors import MalformedBody, MissingOrInvalidField, WakeError
from wold.schemas.wake import WakeRequest, WakeResult
from wold.utils.mac import parse_mac
from wold.utils.net import SocketAddress
from wold.utils.wol import DEFAULT_DESTINATION, build_magic_packet, send_magic_packet

logger = logging.getLogger(__name__)


class WakeHandler:
    """Runs the wake pipeline against a fixed broadcast destination.

    Holds only read-only configuration, so one instance can serve any number
    of concurrent requests.
    """

    def __init__(
        self,
        destination: SocketAddress = DEFAULT_DESTINATION,
        source: str | None = None,
    ):
        self._destination = destination
        self._source = source

    @property
    def destination(self) -> SocketAddress:
        return self._destination

    def handle(self, body: bytes | str) -> WakeResult:
        """Handle a raw HTTP request body. Always returns exactly one result."""
        try:
            request = self._decode(body)
        except WakeError as e:
            return self._failure(e)
        return self.wake(request.target)

    def wake(self, target: str) -> WakeResult:
        """Parse ``target`` and broadcast its magic packet."""
        logger.debug("Wake request for %r -> %s", target, self._destination)
        try:
            mac = parse_mac(target)
            send_magic_packet(build_magic_packet(mac), self._destination, self._source)
        except WakeError as e:
            return self._failure(e)

        logger.info("Wake-up signal sent to %s via %s", mac, self._destination)
        return WakeResult(target=str(mac), destination=str(self._destination))

    @staticmethod
    def _decode(body: bytes | str) -> WakeRequest:
        try:
            data = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise MalformedBody(f"Request body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MissingOrInvalidField("Request body must be a JSON object with a 'target' field")

        try:
            return WakeRequest.model_validate(data)
        except ValidationError as e:
            if "target" not in data:
                raise MissingOrInvalidField("Missing 'target' field") from e
            raise MissingOrInvalidField("'target' must be a string") from e

    def _failure(self, error: WakeError) -> WakeResult:
        logger.warning("Wake request failed (%s): %s", error.kind, error.detail)
        return WakeResult(
            status=error.kind,
            status_code=error.status_code,
            detail=error.detail,
            destination=str(self._destination) if error.status_code >= 500 else None,
        )
