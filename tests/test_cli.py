"""CLI parsing, dispatch and completion tests.

Verifies the command table, alias routing and error reporting of
``jumper.cli.main``.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

import shtab

from fakes import FakePicker, FakeTmux, make_context
from jumper import cli
from jumper.line_store import read_lines, write_lines


class CliDispatchTests(unittest.TestCase):
    def test_aliases_route_to_same_command(self) -> None:
        parser = cli.build_parser()
        for argv in (["list"], ["ls"], ["l"]):
            with self.subTest(argv=argv):
                self.assertEqual(parser.parse_args(argv).spec.name, "list")

    def test_add_accepts_optional_directory(self) -> None:
        parser = cli.build_parser()

        self.assertIsNone(parser.parse_args(["add"]).dir)
        self.assertEqual(parser.parse_args(["a", "/src"]).dir, "/src")

    def test_completion_rejects_unknown_shell(self) -> None:
        with mock.patch("sys.stderr"), self.assertRaises(SystemExit) as caught:
            cli.build_parser().parse_args(["completion", "powershell"])

        self.assertEqual(caught.exception.code, 2)

    def test_no_subcommand_runs_switcher(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            picker = FakePicker("")
            ctx = make_context(Path(tmp), pick=picker)
            write_lines(ctx.settings.projects_file, ["/a"])

            self.assertEqual(cli.main([], ctx=ctx), 0)

            self.assertEqual(picker.offered, [["/a"]])

    def test_status_subcommand_prints_list(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            ctx = make_context(Path(tmp))
            write_lines(ctx.settings.projects_file, ["/a --depth 1"])

            cli.main(["s"], ctx=ctx)

            self.assertEqual(ctx.out.getvalue(), "/a --depth 1\n")

    def test_add_subcommand_appends(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            ctx = make_context(Path(tmp))

            cli.main(["add", "/src/app"], ctx=ctx)

            self.assertEqual(read_lines(ctx.settings.projects_file), ["/src/app"])

    def test_activation_failure_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            ctx = make_context(Path(tmp), tmux=FakeTmux(create_ok=False), pick=FakePicker("/gone"))
            write_lines(ctx.settings.projects_file, ["/gone"])

            with self.assertRaises(SystemExit) as caught:
                cli.main([], ctx=ctx)

            self.assertEqual(caught.exception.code, "jumper: Failed to create new tmux session")
            self.assertEqual(read_lines(ctx.settings.history_file), ["/gone"])

    def test_verbose_flag_enables_debug_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            ctx = make_context(Path(tmp))
            with mock.patch("jumper.cli.configure_logging") as configure:
                cli.main(["-v", "status"], ctx=ctx)

            configure.assert_called_once_with(True)

    def test_verbose_flag_is_accepted_after_subcommand(self) -> None:
        parser = cli.build_parser()

        self.assertTrue(parser.parse_args(["list", "-v"]).verbose)
        self.assertTrue(parser.parse_args(["-v", "list"]).verbose)
        self.assertTrue(parser.parse_args(["add", "--verbose", "/src"]).verbose)
        self.assertFalse(parser.parse_args(["list"]).verbose)
        self.assertFalse(parser.parse_args([]).verbose)


class CompletionTests(unittest.TestCase):
    def test_completion_subcommand_writes_bash_script(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            ctx = make_context(Path(tmp))

            cli.main(["completion", "bash"], ctx=ctx)

            script = ctx.out.getvalue()
            self.assertIn("_shtab_jumper", script)
            self.assertIn("--verbose", script)

    def test_every_command_appears_in_each_shell(self) -> None:
        for shell in cli.COMPLETION_SHELLS:
            script = shtab.complete(cli.build_parser(), shell=shell)
            for spec in cli.COMMANDS:
                with self.subTest(shell=shell, name=spec.name):
                    self.assertIn(spec.name, script)

    def test_add_completes_directories(self) -> None:
        parser = cli.build_parser()

        self.assertIn("_shtab_compgen_dirs", shtab.complete(parser, shell="bash"))
        self.assertIn("_files -/", shtab.complete(parser, shell="zsh"))


if __name__ == "__main__":
    unittest.main()
