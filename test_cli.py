#!/usr/bin/env python3
"""
Tests for the namechecker command line entry point.

Usage:
    pip install -e ".[test]"
    pytest test_cli.py
"""

import sys
from unittest.mock import MagicMock, patch

import httpx
import pytest

from namechecker import __version__, main


def run_main(argv: list[str]) -> int:
    """Run main() with argv and return its exit code."""
    with patch.object(sys, "argv", ["namechecker", *argv]):
        with pytest.raises(SystemExit) as exc_info:
            main()
    return exc_info.value.code


def available_handler(request: httpx.Request) -> httpx.Response:
    if request.url.host == "github.com":
        return httpx.Response(404)
    if request.url.path == "/-/v1/search":
        return httpx.Response(200, json={"objects": []})
    return httpx.Response(404, json={"error": "Scope not found"})


@pytest.fixture
def no_network():
    """Fail the test if anything tries to open an HTTP client."""
    with patch("namechecker.report.create_client") as mock_create:
        mock_create.side_effect = AssertionError("network used")
        yield mock_create


@pytest.fixture
def mock_network(monkeypatch):
    """Route every request through a MockTransport, recording them."""
    seen = []

    def handler(request):
        seen.append(request)
        return available_handler(request)

    monkeypatch.setattr(
        "namechecker.report.create_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    monkeypatch.delenv("NO_COLOR", raising=False)
    return seen


class TestInvocationErrors:
    def test_no_arguments_prints_usage(self, no_network, capsys):
        assert run_main([]) == 1

        out = capsys.readouterr().out
        assert out.startswith("Usage: namechecker <id> [id2] [id3] ...")
        no_network.assert_not_called()

    def test_blank_arguments_only(self, no_network, capsys):
        assert run_main(["", "   ", "\t"]) == 1

        captured = capsys.readouterr()
        assert "Error: Please provide at least one valid ID" in captured.err
        assert captured.out == ""
        no_network.assert_not_called()


class TestFlags:
    def test_help(self, no_network, capsys):
        assert run_main(["--help"]) == 0
        assert "Usage: namechecker" in capsys.readouterr().out

    def test_version(self, no_network, capsys):
        assert run_main(["-V"]) == 0
        assert capsys.readouterr().out.strip() == f"namechecker {__version__}"

    def test_flags_among_names_are_names(self, mock_network, capsys):
        assert run_main(["abcd", "--help"]) == 0
        assert "Checking availability for: --help" in capsys.readouterr().out


class TestEndToEnd:
    def test_available_name(self, mock_network, capsys):
        assert run_main(["abcd"]) == 0

        out = capsys.readouterr().out
        assert "Checking availability for: abcd" in out
        assert (
            "\x1b[32m✓ Available\x1b[0m - GitHub: https://github.com/abcd"
            " → Create: https://github.com/account/organizations/new?plan=free"
        ) in out
        assert (
            "\x1b[32m✓ Available\x1b[0m - npm org: https://www.npmjs.com/org/abcd"
            " → Create: https://www.npmjs.com/org/create"
        ) in out
        assert "=" * 60 not in out

    def test_blank_names_are_skipped(self, mock_network, capsys):
        assert run_main(["abcd", " ", "wxyz"]) == 0

        out = capsys.readouterr().out
        assert out.count("=" * 60) == 2
        assert out.index("for: abcd") < out.index("for: wxyz")
        hosts = {request.url.host for request in mock_network}
        assert hosts == {"github.com", "registry.npmjs.org"}

    def test_failed_checks_still_exit_zero(self, monkeypatch, capsys):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        monkeypatch.setattr(
            "namechecker.report.create_client",
            lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        assert run_main(["abcd"]) == 0
        assert capsys.readouterr().out.count("Taken") == 2

    def test_bad_name_does_not_stop_the_run(self, mock_network, capsys):
        assert run_main(["good", "bad\x00name", "other"]) == 0

        out = capsys.readouterr().out
        assert out.count("=" * 60) == 3
        assert "Checking availability for: other" in out
        assert out.count("✓ Available") == 4
        assert out.count("✗ Taken") == 2

    def test_unexpected_error_exits_one(self):
        with patch("namechecker.report.run", MagicMock(side_effect=RuntimeError("boom"))):
            assert run_main(["abcd"]) == 1
