"""Tests for the command-line entry point and its exit codes."""

from __future__ import annotations

import socket
from pathlib import Path

from config import EXIT_BIND_ERROR, EXIT_CONFIG_ERROR
from server import main


def test_missing_arguments_exit_with_config_error(tmp_path: Path) -> None:
    log_path = tmp_path / "myOwnWebServer.log"

    exit_code = main(["-webIP", "127.0.0.1", "-webPort", "5000"], log_path=log_path)

    assert exit_code == EXIT_CONFIG_ERROR
    log_text = log_path.read_text(encoding="utf-8")
    assert "[ERROR] - Missing or invalid arguments" in log_text
    assert "[SERVER STARTED]" not in log_text


def test_unknown_flag_exits_with_config_error(tmp_path: Path) -> None:
    log_path = tmp_path / "myOwnWebServer.log"
    argv = ["-webRoot", str(tmp_path), "-webIP", "127.0.0.1", "-webPort", "5000", "-x", "1"]

    assert main(argv, log_path=log_path) == EXIT_CONFIG_ERROR


def test_port_in_use_exits_with_bind_error(tmp_path: Path) -> None:
    log_path = tmp_path / "myOwnWebServer.log"
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        port = blocker.getsockname()[1]

        exit_code = main(
            ["-webRoot", str(tmp_path), "-webIP", "127.0.0.1", "-webPort", str(port)],
            log_path=log_path,
        )

    assert exit_code == EXIT_BIND_ERROR
    assert "[ERROR] - Could not bind 127.0.0.1" in log_path.read_text(encoding="utf-8")
