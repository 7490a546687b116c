"""Tests for the CLI frontend."""

from io import StringIO
from unittest.mock import Mock, patch

import pytest

from lifegame.core.session import SessionConfig
from lifegame.core.snapshot import BoardSnapshot
from lifegame.frontends.cli import (
    ANSI_BLUE_ON_BLACK,
    ANSI_CLEAR,
    CP437_GLYPHS,
    CLILifeGame,
    create_parser,
    main,
    parse_script,
    validate_args,
)


def small_config(**overrides):
    values = dict(width=10, height=10, seed=1)
    values.update(overrides)
    return SessionConfig(**values)


class TestCLILifeGame:
    """Test cases for the CLI host."""

    def test_initialization(self):
        cli = CLILifeGame(small_config())
        assert cli.session.board.shape == (10, 10)
        assert cli.glyphs == "plain"

    def test_invalid_glyph_mode(self):
        with pytest.raises(ValueError):
            CLILifeGame(small_config(), glyphs="fancy")

    def test_headless_run(self):
        """Test frames advance one generation per elapsed period."""
        cli = CLILifeGame(small_config())
        stats = cli.run(frames=8, frame_time=0.125, headless=True)

        assert stats["frames"] == 8
        assert stats["generation"] == 4
        assert stats["draws"] == 4
        assert stats["running"] is True
        assert "duration_seconds" in stats

    def test_scripted_pause(self):
        cli = CLILifeGame(small_config())
        stats = cli.run(frames=8, frame_time=0.125, headless=True, script={0: ["space"]})

        assert stats["generation"] == 0
        assert stats["state"] == "paused"

    def test_scripted_single_step(self):
        cli = CLILifeGame(small_config())
        stats = cli.run(frames=8, frame_time=0.125, headless=True, script={0: ["space"], 3: ["s", "s"]})
        assert stats["generation"] == 2

    def test_scripted_clear_and_unbound_keys(self):
        cli = CLILifeGame(small_config())
        stats = cli.run(frames=4, frame_time=0.125, headless=True, script={0: ["c", "x"]})
        assert stats["population"] == 0

    def test_draws_to_output(self):
        out = StringIO()
        cli = CLILifeGame(small_config(width=4, height=2, initial_probability=0.0), out=out)

        with patch("lifegame.frontends.cli.time.sleep") as sleep:
            cli.run(frames=2, frame_time=0.125)

        assert sleep.call_count == 2
        text = out.getvalue()
        assert text.startswith(ANSI_CLEAR)
        assert "....\n...." in text
        assert "generation 1" in text

    def test_render_plain(self):
        cli = CLILifeGame(small_config())
        snapshot = BoardSnapshot.capture(cli.session.board)
        assert cli.render(snapshot) == str(snapshot)

    def test_render_random_glyphs(self):
        cli = CLILifeGame(small_config(width=3, height=1, initial_probability=1.0), glyphs="random", glyph_seed=3)
        rendered = cli.render(BoardSnapshot.capture(cli.session.board))

        assert rendered.count(ANSI_BLUE_ON_BLACK) == 3
        assert "\n" not in rendered

    def test_glyph_table(self):
        assert "A" in CP437_GLYPHS
        assert " " not in CP437_GLYPHS
        assert all(ch.isprintable() for ch in CP437_GLYPHS)


class TestParseScript:
    """Test cases for scripted key press parsing."""

    def test_empty(self):
        assert parse_script("") == {}
        assert parse_script("  ") == {}

    def test_pairs(self):
        assert parse_script("0:space, 3:s,3:r") == {0: ["space"], 3: ["s", "r"]}

    def test_invalid(self):
        for bad in ["space", "x:s", "3:", "-1:s"]:
            with pytest.raises(ValueError):
                parse_script(bad)


class TestArguments:
    """Test cases for argument parsing and validation."""

    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.width == 80
        assert args.height == 40
        assert args.population == 0.25
        assert args.period == 0.25
        assert args.draw_period is None
        assert args.glyphs == "plain"
        assert validate_args(args) is True

    def test_invalid(self, capsys):
        args = create_parser().parse_args(["--width", "-5", "--period", "0", "--frames", "-1"])
        assert validate_args(args) is False
        output = capsys.readouterr().out
        assert "Width must be non-negative" in output
        assert "Step period must be positive" in output
        assert "Frames must be non-negative" in output


class TestMain:
    """Test cases for the main entry point."""

    def test_headless_main(self, capsys):
        argv = ["lifegame-cli", "-W", "8", "-H", "6", "--headless", "--frames", "10", "--seed", "4", "--show-grid"]
        with patch("sys.argv", argv):
            result = main()

        assert result == 0
        output = capsys.readouterr().out
        assert "Ran 10 frames" in output
        assert "Final grid:" in output

    def test_main_invalid_args(self):
        with patch("sys.argv", ["lifegame-cli", "--population", "2"]):
            assert main() == 1

    def test_main_invalid_script(self):
        with patch("sys.argv", ["lifegame-cli", "--headless", "--keys", "nope"]):
            assert main() == 1

    @patch("lifegame.frontends.cli.CLILifeGame")
    def test_main_keyboard_interrupt(self, mock_cli_class):
        mock_cli = Mock()
        mock_cli.run.side_effect = KeyboardInterrupt()
        mock_cli_class.return_value = mock_cli

        with patch("sys.argv", ["lifegame-cli"]):
            assert main() == 1

    @patch("lifegame.frontends.cli.CLILifeGame")
    def test_main_exception(self, mock_cli_class):
        mock_cli = Mock()
        mock_cli.run.side_effect = Exception("Test error")
        mock_cli_class.return_value = mock_cli

        with patch("sys.argv", ["lifegame-cli"]):
            assert main() == 1
