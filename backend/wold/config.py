"""wold configuration, Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

import ipaddress
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wold.utils.net import SocketAddress


class Settings(BaseSettings):
    """Process-wide settings, read-only once the server is started."""

    app_name: str = "wold"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    listen_addr: str = "127.0.0.1:3000"
    broadcast_addr: str = "255.255.255.255:9"
    source_addr: str | None = None  # local interface IP to send from
    api_prefix: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WOLD_",
        extra="ignore",
    )

    @field_validator("listen_addr", "broadcast_addr")
    @classmethod
    def _validate_socket_addr(cls, value: str) -> str:
        return str(SocketAddress.parse(value))

    @field_validator("source_addr")
    @classmethod
    def _validate_source_addr(cls, value: str | None) -> str | None:
        if not value:
            return None
        # Bare interface address; the OS picks the port.
        return str(ipaddress.ip_address(value))

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def listen(self) -> SocketAddress:
        return SocketAddress.parse(self.listen_addr)

    @property
    def destination(self) -> SocketAddress:
        return SocketAddress.parse(self.broadcast_addr)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
