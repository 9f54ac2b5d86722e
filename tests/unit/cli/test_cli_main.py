"""CLI argument, config-baseline, and error-exit behavior tests.

Verifies how ``colortree.cli.main`` turns argv into a rendered tree.
Prevents regressions in command-line entrypoint ergonomics.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from colortree import cli
from colortree.palette import PURPLE, RESET, WHITE


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.base = Path(self._tmp.name)
        self.config_path = self.base / "config.json"
        env = {key: value for key, value in os.environ.items() if key != "NO_COLOR"}
        env["COLORTREE_CONFIG"] = str(self.config_path)
        patcher = mock.patch.dict(os.environ, env, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.root = self.base / "project"
        self.root.mkdir()
        (self.root / "main.py").write_text("", encoding="utf-8")
        (self.root / ".env").write_text("", encoding="utf-8")

    def _run(self, argv: list[str]) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", io.StringIO()):
            cli.main(argv)
        return stdout.getvalue()

    def test_renders_colored_tree_by_default(self) -> None:
        output = self._run([str(self.root)])

        self.assertEqual(output, f"{WHITE}project/\n{RESET}{PURPLE}   main.py\n{RESET}")

    def test_flags_disable_color_and_show_hidden(self) -> None:
        output = self._run(["-nc", "-h", str(self.root)])

        self.assertEqual(output, "project/\n   .env\n   main.py\n")

    def test_config_baselines_apply_without_flags(self) -> None:
        self.config_path.write_text('{"show_hidden": true, "use_color": false}\n', encoding="utf-8")

        output = self._run([str(self.root)])

        self.assertEqual(output, "project/\n   .env\n   main.py\n")

    def test_no_color_environment_variable_disables_color(self) -> None:
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            output = self._run([str(self.root)])

        self.assertEqual(output, "project/\n   main.py\n")

    def test_missing_arguments_exit_with_message(self) -> None:
        with self.assertRaises(SystemExit) as exc_info:
            self._run([])

        self.assertTrue(str(exc_info.exception.code).startswith("Filepath missing."))
        self.assertIn(cli.USAGE, str(exc_info.exception.code))

    def test_unknown_flag_exit_names_the_flag(self) -> None:
        with self.assertRaises(SystemExit) as exc_info:
            self._run(["-x", str(self.root)])

        self.assertTrue(str(exc_info.exception.code).startswith("-x is not a valid argument."))

    def test_missing_directory_exits_non_zero(self) -> None:
        missing = self.base / "nope"
        with self.assertRaises(SystemExit) as exc_info:
            self._run([str(missing)])

        self.assertTrue(str(exc_info.exception.code).startswith(f"{missing} does not exist."))

    def test_hidden_root_exits_non_zero(self) -> None:
        secret = self.base / ".secret"
        secret.mkdir()

        with self.assertRaises(SystemExit) as exc_info:
            self._run([str(secret)])

        self.assertIn(".secret is hidden", str(exc_info.exception.code))

    def test_defaults_to_sys_argv(self) -> None:
        stdout = io.StringIO()
        with (
            mock.patch("sys.argv", ["colortree", "-nc", str(self.root)]),
            mock.patch("sys.stdout", stdout),
            mock.patch("sys.stderr", io.StringIO()),
        ):
            cli.main()

        self.assertEqual(stdout.getvalue(), "project/\n   main.py\n")


if __name__ == "__main__":
    unittest.main()
