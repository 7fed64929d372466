"""Shared pytest fixtures for invoicekit tests."""

import json
import pytest


@pytest.fixture
def valid_raw():
    """Return a raw invoice record that passes every check."""
    return {
        "amount": 49.99,
        "description": "Monthly plan",
        "status": "PAID",
        "cardLast4Digits": "4242",
        "createdAt": "2024-03-01T12:00:00Z",
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def write_json(tmp_path):
    """Return a helper that writes data to a JSON file and returns its path."""

    def _write(data, name="invoices.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
