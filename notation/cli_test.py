"""命令行测试"""

from __future__ import annotations

import json

import pytest
from loguru import logger
from typer.testing import CliRunner

from notation.cli import app
from notation.types import EMPTY_FEN, INITIAL_FEN

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    """每次调用都会重新配置 logger，测试后恢复静默"""
    yield
    logger.remove()
    logger.disable("notation")


class TestFenCommand:
    def test_normalize(self):
        result = runner.invoke(app, ["fen", "8/8/8/8/8/8/8/8"])
        assert result.exit_code == 0
        assert result.output.strip() == EMPTY_FEN

    def test_promoted(self):
        result = runner.invoke(app, ["fen", "--promoted", "8/8/8/8/8/8/8/Q~7[] w - - 0 1"])
        assert result.exit_code == 0
        assert result.output.strip() == "8/8/8/8/8/8/8/Q~7/ w - - 0 1"

    def test_json(self):
        fen = INITIAL_FEN + " +1+2"
        result = runner.invoke(app, ["fen", fen, "--json"])
        assert result.exit_code == 0

        data = json.loads(result.output)
        assert data["fen"] == fen
        assert data["setup"]["turn"] == "white"
        assert data["setup"]["castling_rights"] == ["a1", "h1", "a8", "h8"]
        assert data["setup"]["remaining_checks"] == {"white": 2, "black": 1}
        assert data["setup"]["board"]["e1"] == {"role": "king", "color": "white", "promoted": False}

    def test_invalid(self):
        result = runner.invoke(app, ["fen", "8/8/8/8/8/8/8/X7"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestValidateCommand:
    def test_ok(self):
        result = runner.invoke(app, ["validate", INITIAL_FEN])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_invalid(self):
        result = runner.invoke(app, ["validate", "8/8/8/8/8/8/8/8 w - - 0 1 +4+0"])
        assert result.exit_code == 1
        assert "remaining_checks" in result.output


class TestUsiCommand:
    def test_drop(self):
        result = runner.invoke(app, ["usi", "P*5e"])
        assert result.exit_code == 0
        assert result.output.strip() == "P*5e"

    def test_json(self):
        result = runner.invoke(app, ["usi", "7g7f+", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["move"] == {"type": "move", "from": "7g", "to": "7f", "promotion": True}

    def test_invalid(self):
        result = runner.invoke(app, ["usi", "K*5e"])
        assert result.exit_code == 1
        assert "Invalid USI move" in result.output


class TestShowCommand:
    def test_show(self):
        result = runner.invoke(app, ["show", INITIAL_FEN])
        assert result.exit_code == 0
        assert "Turn: white" in result.output
        assert "Castling: KQkq" in result.output
        assert "Pieces: white=16 black=16" in result.output

    def test_show_invalid(self):
        result = runner.invoke(app, ["show", "nope"])
        assert result.exit_code == 1


class TestLogOptions:
    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "notation.log"
        result = runner.invoke(app, ["--log-file", str(log_file), "validate", "X"])
        assert result.exit_code == 1

        logger.remove()
        assert "FEN rejected" in log_file.read_text()
