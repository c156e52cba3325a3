"""Command-line front door for jumper.

Declares the command table, builds the argparse parser from it, configures
logging, and dispatches into ``jumper.commands``. Any ``JumperError`` becomes
a non-zero exit with its message on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import shtab

from . import commands
from .commands import CommandContext
from .config import load_settings
from .errors import JumperError

PROG = "jumper"
COMPLETION_SHELLS = tuple(shtab.SUPPORTED_SHELLS)


@dataclass(frozen=True)
class CommandSpec:
    name: str
    aliases: tuple[str, ...]
    help: str
    run: Callable[[CommandContext, argparse.Namespace], int]
    add_arguments: Callable[[argparse.ArgumentParser], None] | None = None

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


def _add_dir_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "dir",
        nargs="?",
        default=None,
        help="The project directory to add. Defaults to the current directory.",
    ).complete = shtab.DIRECTORY


def _add_shell_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "shell",
        choices=COMPLETION_SHELLS,
        help=f"The shell to generate the script for ({', '.join(COMPLETION_SHELLS)}).",
    )


def _completion(ctx: CommandContext, args: argparse.Namespace) -> int:
    ctx.out.write(shtab.complete(build_parser(), shell=args.shell))
    return 0


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        "add",
        ("a",),
        "Add a project to the projects file.",
        lambda ctx, args: commands.add_project(ctx, args.dir),
        _add_dir_argument,
    ),
    CommandSpec(
        "delete",
        ("del", "d"),
        "Delete a project from the projects file.",
        lambda ctx, args: commands.delete_project(ctx),
    ),
    CommandSpec(
        "list",
        ("ls", "l"),
        "List every resolved project path.",
        lambda ctx, args: commands.list_projects(ctx),
    ),
    CommandSpec(
        "status",
        ("stat", "s"),
        "Display the contents of the projects file.",
        lambda ctx, args: commands.show_status(ctx),
    ),
    CommandSpec(
        "set-depth",
        ("depth", "sd"),
        "Set or remove depth for a project.",
        lambda ctx, args: commands.set_depth(ctx),
    ),
    CommandSpec(
        "clear-cache",
        ("cc",),
        "Clear the cache file.",
        lambda ctx, args: commands.clear_cache(ctx),
    ),
    CommandSpec(
        "completion",
        ("comp", "c"),
        "Generate a shell completion script.",
        _completion,
        _add_shell_argument,
    ),
)


def _global_options(default: object) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand.

    Subcommands pass ``argparse.SUPPRESS`` so an unset flag there does not
    overwrite a value parsed at the top level.
    """
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log debug details to stderr.",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="fzf through a list of projects and jump to their tmux sessions.",
        parents=[_global_options(False)],
    )
    sub_options = _global_options(argparse.SUPPRESS)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for spec in COMMANDS:
        sub = subparsers.add_parser(
            spec.name,
            aliases=list(spec.aliases),
            help=spec.help,
            parents=[sub_options],
        )
        sub.set_defaults(spec=spec)
        if spec.add_arguments is not None:
            spec.add_arguments(sub)
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None, ctx: CommandContext | None = None) -> int:
    """Parse ``argv`` and run the selected command.

    With no subcommand the interactive project switcher runs. ``ctx`` is
    primarily for tests; when omitted the real collaborators are wired from
    the user's settings.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if ctx is None:
        ctx = CommandContext.create(load_settings())

    spec: CommandSpec | None = getattr(args, "spec", None)
    try:
        if spec is None:
            status = commands.run_switcher(ctx)
        else:
            status = spec.run(ctx, args)
    except JumperError as exc:
        raise SystemExit(f"{PROG}: {exc}") from exc
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    if status:
        raise SystemExit(status)
    return status


if __name__ == "__main__":
    main()
