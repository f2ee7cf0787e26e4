"""Command line entrypoint: ``wold serve`` and ``wold send``."""

import ipaddress
from typing import Optional

import typer
from pydantic import ValidationError

from wold.config import Settings
from wold.main import run, setup_logging
from wold.services.wake_service import WakeHandler
from wold.utils.net import SocketAddress

app = typer.Typer(
    no_args_is_help=True,
    help="Send Wake-on-LAN magic packets, directly or on HTTP request.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _socket_addr(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return str(SocketAddress.parse(value))
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _interface_addr(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return str(ipaddress.ip_address(value))
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _settings(**overrides: Optional[str]) -> Settings:
    """Environment / .env settings with command line values on top."""
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        raise typer.BadParameter(f"invalid configuration: {e}") from e


@app.command()
def serve(
    listen: Optional[str] = typer.Option(
        None, "-l", "--listen", metavar="ADDRESS:PORT", callback=_socket_addr,
        help="Address to serve HTTP on [default: 127.0.0.1:3000]",
    ),
    broadcast: Optional[str] = typer.Option(
        None, "-d", "-b", "--broadcast", metavar="ADDRESS:PORT", callback=_socket_addr,
        help="Where to send magic packets [default: 255.255.255.255:9]",
    ),
) -> None:
    """Start the HTTP server. POST {"target": "aa:bb:cc:dd:ee:ff"} to / to wake a host."""
    settings = _settings(listen_addr=listen, broadcast_addr=broadcast)
    setup_logging(settings.log_level)
    run(settings)


@app.command()
def send(
    target: str = typer.Argument(..., metavar="MAC", help="Hardware address, e.g. aa:bb:cc:dd:ee:ff"),
    broadcast: Optional[str] = typer.Option(
        None, "-d", "-b", "--broadcast", metavar="ADDRESS:PORT", callback=_socket_addr,
        help="Where to send the magic packet [default: 255.255.255.255:9]",
    ),
    source: Optional[str] = typer.Option(
        None, "--source", metavar="ADDRESS", callback=_interface_addr,
        help="Local interface address to send from",
    ),
) -> None:
    """Broadcast one magic packet and exit."""
    settings = _settings(broadcast_addr=broadcast, source_addr=source)
    setup_logging(settings.log_level)

    handler = WakeHandler(destination=settings.destination, source=settings.source_addr)
    result = handler.wake(target)
    if result.ok:
        typer.echo(f"Wake-up signal sent to {result.target} via {result.destination}")
        return

    typer.secho(f"error: {result.detail}", fg=typer.colors.RED, err=True)
    # Bad input is a usage error; a failed send is a runtime one.
    raise typer.Exit(code=2 if result.status_code < 500 else 1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
