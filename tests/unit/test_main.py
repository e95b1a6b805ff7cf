"""Unit tests for the demo entry point."""

import os
import re
from unittest.mock import MagicMock

from singlelog.main import build_parser, main, run_thread_demo
from singlelog.pipeline.log_pipeline import LoggerInterface


class TestBuildParser:
    """Tests for command-line parsing."""

    def test_defaults(self):
        """Test default options mirror the original demo."""
        args = build_parser().parse_args([])

        assert args.log_file is None
        assert args.threads == 5
        assert args.messages == 3
        assert args.stagger_ms == 50
        assert args.echo is True

    def test_custom_options(self):
        """Test parsing of all options."""
        args = build_parser().parse_args(
            ["--log-file", "demo.log", "-t", "2", "-m", "4", "--stagger-ms", "0", "--no-echo"]
        )

        assert args.log_file == "demo.log"
        assert args.threads == 2
        assert args.messages == 4
        assert args.stagger_ms == 0
        assert args.echo is False


class TestRunThreadDemo:
    """Tests for the concurrent logging demo."""

    def test_logs_every_message(self):
        """Test that each thread logs its messages."""
        mock_logger = MagicMock(spec=LoggerInterface)

        run_thread_demo(mock_logger, threads=3, messages=2, stagger_ms=0)

        logged = sorted(c.args[0] for c in mock_logger.log.call_args_list)
        assert logged == sorted(
            f"Thread {i} - Message {j}" for i in range(1, 4) for j in range(1, 3)
        )


class TestMain:
    """Tests for the full demo run."""

    def test_main_writes_expected_log(self, tmp_path, clean_env, capsys):
        """Test that the demo produces the full log and reports its location."""
        path = tmp_path / "demo.log"

        exit_code = main(["--log-file", str(path), "--no-echo"])

        assert exit_code == 0
        lines = path.read_text(encoding="utf-8").splitlines()
        # 4 direct + 4 from services + 15 from threads
        assert len(lines) == 23
        assert sum(1 for line in lines if line.startswith("[ERROR] ")) == 1
        thread_lines = [line for line in lines if re.search(r" - Thread \d - Message \d$", line)]
        assert len(thread_lines) == 15

        out = capsys.readouterr().out
        assert "=== DEMO COMPLETED ===" in out
        assert str(path) in out

    def test_main_leaves_environment_untouched(self, tmp_path, clean_env):
        """Test that command-line options do not leak into os.environ."""
        path = tmp_path / "demo.log"

        assert main(["--log-file", str(path), "--no-echo", "-t", "1", "-m", "1"]) == 0

        assert "SINGLELOG_FILE" not in os.environ
        assert "SINGLELOG_ECHO" not in os.environ
        assert path.exists()

    def test_main_no_echo_prints_no_entries(self, tmp_path, clean_env, capsys):
        """Test that --no-echo keeps entries off the console."""
        main(["--log-file", str(tmp_path / "demo.log"), "--no-echo", "-t", "1", "-m", "1"])

        out = capsys.readouterr().out
        assert "[INFO]" not in out

    def test_main_reports_unusable_log_file(self, unusable_log_path, capsys):
        """Test that an unusable log file ends the demo with exit code 1."""
        exit_code = main(["--log-file", str(unusable_log_path), "--no-echo"])

        assert exit_code == 1
        assert "=== DEMO COMPLETED ===" not in capsys.readouterr().out
