"""Test fixtures: settings, mocked UDP socket and FastAPI test client."""

from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wold.config import Settings
from wold.main import create_app
from wold.utils.wol import PACKET_SIZE


@pytest.fixture
def settings():
    """Default settings, isolated from the environment's .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def mock_socket():
    """Patch the socket module used by the transmitter.

    ``mock_socket.socket.return_value`` is the UDP socket the code sees.
    """
    with patch("wold.utils.wol.socket") as mock:
        mock.socket.return_value.sendto.return_value = PACKET_SIZE
        yield mock


@pytest_asyncio.fixture
async def client(settings: Settings):
    """Provide an async test client for an app built from ``settings``."""
    app = create_app(settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
