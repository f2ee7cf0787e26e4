"""Tests for the command line entrypoint."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from wold.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env / WOLD_* variables out of CLI tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("WOLD_LISTEN_ADDR", "WOLD_BROADCAST_ADDR", "WOLD_SOURCE_ADDR", "WOLD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSend:
    def test_send_default_destination(self, mock_socket):
        result = runner.invoke(app, ["send", "00:11:22:33:44:55"])

        assert result.exit_code == 0
        assert "00:11:22:33:44:55" in result.output
        sock = mock_socket.socket.return_value
        packet, destination = sock.sendto.call_args.args
        assert len(packet) == 102
        assert destination == ("255.255.255.255", 9)

    @pytest.mark.parametrize("flag", ["-d", "-b", "--broadcast"])
    def test_send_destination_flag(self, mock_socket, flag):
        result = runner.invoke(app, ["send", "00:11:22:33:44:55", flag, "10.0.0.255:7"])

        assert result.exit_code == 0
        assert mock_socket.socket.return_value.sendto.call_args.args[1] == ("10.0.0.255", 7)

    def test_send_source(self, mock_socket):
        result = runner.invoke(app, ["send", "00:11:22:33:44:55", "--source", "10.0.0.2"])

        assert result.exit_code == 0
        mock_socket.socket.return_value.bind.assert_called_once_with(("10.0.0.2", 0))

    def test_send_malformed_address(self, mock_socket):
        result = runner.invoke(app, ["send", "not-a-mac"])

        assert result.exit_code == 2
        mock_socket.socket.assert_not_called()

    def test_send_failure(self, mock_socket):
        mock_socket.socket.return_value.sendto.side_effect = OSError(101, "Network is unreachable")

        result = runner.invoke(app, ["send", "00:11:22:33:44:55"])

        assert result.exit_code == 1

    def test_bad_destination(self, mock_socket):
        result = runner.invoke(app, ["send", "00:11:22:33:44:55", "-d", "nowhere"])

        assert result.exit_code == 2
        mock_socket.socket.assert_not_called()

    def test_bad_source(self, mock_socket):
        result = runner.invoke(app, ["send", "00:11:22:33:44:55", "--source", "eth0"])

        assert result.exit_code == 2


class TestServe:
    def test_serve_defaults(self):
        with patch("wold.cli.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        settings = mock_run.call_args.args[0]
        assert str(settings.listen) == "127.0.0.1:3000"
        assert str(settings.destination) == "255.255.255.255:9"

    def test_serve_flags(self):
        with patch("wold.cli.run") as mock_run:
            result = runner.invoke(app, ["serve", "-l", "0.0.0.0:8080", "-d", "192.168.1.255:9"])

        assert result.exit_code == 0
        settings = mock_run.call_args.args[0]
        assert str(settings.listen) == "0.0.0.0:8080"
        assert str(settings.destination) == "192.168.1.255:9"

    def test_serve_bad_listen(self):
        with patch("wold.cli.run") as mock_run:
            result = runner.invoke(app, ["serve", "-l", "127.0.0.1"])

        assert result.exit_code == 2
        mock_run.assert_not_called()


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag):
    result = runner.invoke(app, [flag])

    assert result.exit_code == 0
    assert "serve" in result.output
    assert "send" in result.output



@pytest.mark.parametrize(
    "name,value",
    [("WOLD_BROADCAST_ADDR", "nowhere"), ("WOLD_SOURCE_ADDR", "eth0"), ("WOLD_LOG_LEVEL", "loud")],
)
def test_invalid_environment_is_usage_error(monkeypatch, mock_socket, name, value):
    monkeypatch.setenv(name, value)

    result = runner.invoke(app, ["send", "00:11:22:33:44:55"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValidationError)
    mock_socket.socket.assert_not_called()


def test_invalid_env_file_is_usage_error(tmp_path):
    (tmp_path / ".env").write_text("WOLD_LISTEN_ADDR=127.0.0.1\n", encoding="utf-8")

    with patch("wold.cli.run") as mock_run:
        result = runner.invoke(app, ["serve"])

    assert result.exit_code == 2
    mock_run.assert_not_called()
