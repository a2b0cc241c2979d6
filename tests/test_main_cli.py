"""Tests for the command-line entry point in main.py."""

from unittest.mock import patch

import pytest

import main


def test_serve_defaults() -> None:
    with patch("main.uvicorn.run") as run:
        assert main.main(["serve"]) == 0
    run.assert_called_once_with("asgi:app", host="127.0.0.1", port=8000, reload=False)


def test_serve_options() -> None:
    with patch("main.uvicorn.run") as run:
        main.main(["serve", "--host", "0.0.0.0", "--port", "8080", "--reload"])
    run.assert_called_once_with("asgi:app", host="0.0.0.0", port=8080, reload=True)


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main.build_parser().parse_args([])


def test_port_must_be_an_integer() -> None:
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["serve", "--port", "http"])
