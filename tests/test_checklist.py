from __future__ import annotations

import io
import logging
import os
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from lambda_streams import checklist, cli
from lambda_streams.config import Settings
from lambda_streams.console import LOGGER_NAME, Console, setup_logging
from lambda_streams.exceptions import UnknownTopicError


def plain_console() -> tuple[Console, io.StringIO]:
    out = io.StringIO()
    return Console(use_color=False, stream=out), out


class ChecklistRunnerTests(unittest.TestCase):
    def test_topics_are_registered_in_order(self) -> None:
        self.assertEqual(list(checklist.TOPICS), ["walkers", "stream_demos"])

    def test_run_prints_banner_per_topic(self) -> None:
        console, out = plain_console()
        checklist.run(Settings(use_color=False), console)
        text = out.getvalue()
        self.assertIn("== Running walkers ==", text)
        self.assertIn("== Running stream_demos ==", text)
        self.assertLess(text.index("Running walkers"), text.index("Running stream_demos"))

    def test_stream_demo_sections_are_all_present(self) -> None:
        console, out = plain_console()
        checklist.run(Settings(use_color=False, topics=("stream_demos",), max_workers=2), console)
        text = out.getvalue()
        for label in (
            "1. Fruits with length > 5 (sorted):",
            "2. Unique fruits:",
            "5. Total length of all fruits:\n41",
            "9. Flattened fruit basket:\n['Apple', 'Banana', 'Kiwi', 'Mango']",
            "10. Longest fruit:\nBanana",
            "10b. Longest of no fruits present: False",
            "12. Parallel iteration:",
        ):
            self.assertIn(label, text)
        parallel_lines = text.split("12. Parallel iteration:\n", 1)[1].split()
        self.assertEqual(sorted(parallel_lines), sorted(["Apple", "Banana", "Kiwi", "Mango",
                                                         "Orange", "Papaya", "Kiwi", "Apple"]))
        self.assertNotIn("Running walkers", text)

    def test_repeated_topic_runs_once(self) -> None:
        self.assertEqual(checklist.select(("walkers", "stream_demos", "walkers")), ["walkers", "stream_demos"])
        console, out = plain_console()
        checklist.run(Settings(use_color=False, topics=("walkers", "walkers")), console)
        self.assertEqual(out.getvalue().count("== Running walkers =="), 1)

    def test_unknown_topic_raises(self) -> None:
        console, _ = plain_console()
        with self.assertRaises(UnknownTopicError) as ctx:
            checklist.run(Settings(topics=("nope",)), console)
        self.assertEqual(ctx.exception.topic, "nope")


class ConsoleTests(unittest.TestCase):
    def test_plain_console_writes_no_escape_codes(self) -> None:
        console, out = plain_console()
        console.heading("Heading")
        console.result("label", 3)
        self.assertNotIn("\x1b[", out.getvalue())
        self.assertEqual(out.getvalue(), "\nHeading\nlabel: 3\n")

    def test_colored_console_wraps_heading_and_result(self) -> None:
        out = io.StringIO()
        console = Console(use_color=True, stream=out)
        with mock.patch.dict(os.environ, {"FORCE_COLOR": "1"}):
            os.environ.pop("NO_COLOR", None)
            console.heading("Heading")
            console.result("label", 3)
        text = out.getvalue()
        self.assertRegex(text, r"\x1b\[[0-9;]*mHeading\x1b\[0m")
        self.assertRegex(text, r"label: \x1b\[[0-9;]*m3\x1b\[0m")

    def test_setup_logging_routes_to_given_stream(self) -> None:
        err = io.StringIO()
        logger = setup_logging("INFO", stream=err)
        logging.getLogger(f"{LOGGER_NAME}.child").info("hello")
        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertFalse(logger.propagate)
        self.assertIn("INFO:lambda_streams.child:hello", err.getvalue())


class SettingsTests(unittest.TestCase):
    def test_rejects_bad_values(self) -> None:
        with self.assertRaises(ValueError):
            Settings(log_level="LOUD")
        with self.assertRaises(ValueError):
            Settings(max_workers=0)


class CliTests(unittest.TestCase):
    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_runs_selected_topic(self) -> None:
        code, out, _ = self.run_cli("walkers", "--no-color")
        self.assertEqual(code, 0)
        self.assertIn("1. Anonymous class result: 10", out)
        self.assertNotIn("stream_demos", out)

    def test_unknown_topic_returns_error_code(self) -> None:
        code, out, err = self.run_cli("nope", "--no-color")
        self.assertEqual(code, 1)
        self.assertIn("Unknown topic 'nope'", err)
        self.assertEqual(out, "")

    def test_invalid_worker_count_returns_usage_code(self) -> None:
        code, _, err = self.run_cli("--workers", "0")
        self.assertEqual(code, 2)
        self.assertIn("max_workers", err)

    def test_log_level_is_case_insensitive(self) -> None:
        args = cli.build_parser().parse_args(["--log-level", "debug", "--workers", "3"])
        settings = cli.settings_from_args(args)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.max_workers, 3)
        self.assertTrue(settings.use_color)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
