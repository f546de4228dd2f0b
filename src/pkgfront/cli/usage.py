"""Usage listings and dispatch diagnostics.

Every function here writes to standard error through
:data:`pkgfront.cli.console.console` and returns nothing; choosing the
exit status is the caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence

from pkgfront.cli.console import console

PROG: str = "pkg"


def _print_names(names: Sequence[str]) -> None:
    for name in names:
        console.print(f"\t{name}")


def print_usage(names: Sequence[str]) -> None:
    """Print the top-level ``pkg <command>`` listing."""
    console.print(f"usage: {PROG} <command> [<args>]")
    console.print()
    console.print("Where <command> can be:")
    _print_names(names)
    console.print()
    console.print(
        "For more information on the different commands"
        f" see '{PROG} help <command>'."
    )


def print_help_usage(names: Sequence[str]) -> None:
    """Print the ``pkg help <command>`` listing."""
    console.print(f"usage: {PROG} help <command>")
    console.print()
    console.print("Where <command> can be:")
    _print_names(names)


def print_invalid_command(token: str) -> None:
    """Report that *token* names no command."""
    console.print(f"{PROG}: '{token}' is not a valid command.", style="bold red")
    console.print(f"See '{PROG} help' for more information on the commands.")


def print_ambiguous(token: str, candidates: Sequence[str]) -> None:
    """Report that *token* abbreviates several commands and list them."""
    print_invalid_command(token)
    console.print()
    console.print(f"Command '{token}' could be one of the following:")
    _print_names(candidates)


def print_generic_usage(name: str) -> None:
    """Fallback usage line for subcommands that ship none."""
    console.print(f"usage: {PROG} {name} [<args>]")
