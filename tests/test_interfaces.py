"""
Test Suite for the CLI and HTTP Interfaces
==========================================
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from rome import __version__
from rome.cli import PROMPT, cli
from rome.server import create_app


# ═══════════════════════════════════════════════════════════════════════════════
# CLI TESTS
# ═══════════════════════════════════════════════════════════════════════════════


class TestCli:
    """Test the click command group."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_repl(self, runner):
        result = runner.invoke(cli, ["repl"], input="MMXXIII\nIIII\n\nIVIV\n")
        assert result.exit_code == 0
        assert PROMPT in result.output
        assert "Result: 2023" in result.output
        assert (
            "Invalid input: character I cannot appear 4 times in a row"
            in result.output
        )
        assert "Invalid input: input is empty" in result.output
        assert "Invalid input: IV cannot be followed by IV" in result.output

    def test_repl_is_default(self, runner):
        result = runner.invoke(cli, [], input="IV\n")
        assert result.exit_code == 0
        assert "Result: 4" in result.output

    def test_repl_ends_on_eof(self, runner):
        result = runner.invoke(cli, ["repl"], input="")
        assert result.exit_code == 0
        assert "Result" not in result.output

    def test_parse_table(self, runner):
        result = runner.invoke(cli, ["parse", "MCMXCIX", "--tokens"])
        assert result.exit_code == 0
        assert "1999" in result.output
        assert "CM" in result.output

    def test_parse_json(self, runner):
        result = runner.invoke(cli, ["parse", "MCMXCIX", "XIV", "--json-output"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [r["value"] for r in data] == [1999, 14]
        assert all(r["ok"] for r in data)

    def test_parse_invalid_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["parse", "X", "IIII", "--json-output"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data[1]["error"]["kind"] == "invalid_repeat_count"

    def test_batch(self, runner, tmp_path):
        numerals = tmp_path / "numerals.txt"
        numerals.write_text("MMXXIII\n  IIII\n\nIV  \n", encoding="utf-8")

        result = runner.invoke(cli, ["batch", str(numerals), "--json-output"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [r["ok"] for r in data] == [True, False, True]
        assert data[2]["value"] == 4

    def test_batch_summary(self, runner, tmp_path):
        numerals = tmp_path / "numerals.txt"
        numerals.write_text("X\nLL\nVV\n", encoding="utf-8")

        result = runner.invoke(cli, ["batch", str(numerals)])
        assert result.exit_code == 0
        assert "1 valid, 2 invalid" in result.output
        assert "invalid_repeat_count" in result.output

    def test_batch_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["batch", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0

    def test_render(self, runner):
        result = runner.invoke(cli, ["render", "1994", "4"])
        assert result.exit_code == 0
        assert "1994: MCMXCIV" in result.output
        assert "4: IV" in result.output

    def test_render_rejects_zero(self, runner):
        result = runner.invoke(cli, ["render", "0"])
        assert result.exit_code == 1


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP API TESTS
# ═══════════════════════════════════════════════════════════════════════════════


class TestServer:
    """Test the Flask endpoints."""

    @pytest.fixture
    def client(self):
        app = create_app({"TESTING": True, "MAX_BATCH_SIZE": 3})
        return app.test_client()

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"

    def test_info(self, client):
        response = client.get("/api/info")
        assert response.get_json()["version"] == __version__

    def test_parse(self, client):
        response = client.post("/api/parse", json={"numeral": "MCMXCIX"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["ok"] is True
        assert data["value"] == 1999
        assert [t["kind"] for t in data["tokens"]] == [
            "repeat", "pair", "pair", "pair",
        ]

    def test_parse_invalid(self, client):
        response = client.post("/api/parse", json={"numeral": "IVIV"})
        assert response.status_code == 422
        data = response.get_json()
        assert data["ok"] is False
        assert data["error"]["kind"] == "invalid_sequence"

    def test_parse_missing_numeral(self, client):
        response = client.post("/api/parse", json={"number": 4})
        assert response.status_code == 400

    def test_parse_not_json(self, client):
        response = client.post("/api/parse", data="XIV")
        assert response.status_code == 400

    def test_parse_path(self, client):
        response = client.get("/api/parse/XIV")
        assert response.status_code == 200
        assert response.get_json()["value"] == 14

    def test_batch(self, client):
        response = client.post(
            "/api/batch", json={"numerals": ["X", "LL", "MMXXIII"]},
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data["total"] == 3
        assert data["valid"] == 2
        assert data["invalid"] == 1
        assert data["results"][1]["error"]["kind"] == "invalid_repeat_count"

    def test_batch_too_large(self, client):
        response = client.post(
            "/api/batch", json={"numerals": ["I", "II", "III", "IV"]},
        )
        assert response.status_code == 413

    def test_batch_bad_body(self, client):
        response = client.post("/api/batch", json={"numerals": "X"})
        assert response.status_code == 400

    def test_render(self, client):
        response = client.get("/api/render/1994")
        assert response.status_code == 200
        assert response.get_json()["numeral"] == "MCMXCIV"

    def test_render_zero(self, client):
        response = client.get("/api/render/0")
        assert response.status_code == 400

    def test_render_negative(self, client):
        response = client.get("/api/render/-5")
        assert response.status_code == 400
        assert "error" in response.get_json()
