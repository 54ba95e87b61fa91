from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .errors import PromptIOError
from .io import IOInterface, StdIO

EXIT_OK = 0
EXIT_END_OF_INPUT = 1
EXIT_IO_ERROR = 2
EXIT_INTERRUPTED = 130

_TRUTHY = {"1", "true", "yes", "on"}


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print a prompt and read one line of input.")
    parser.add_argument("message", nargs="?", default="", help="Prompt text shown before reading.")
    parser.add_argument(
        "--newline",
        action="store_true",
        default=_env_flag("IOPROMPT_NEWLINE"),
        help="End the prompt with a newline.",
    )
    parser.add_argument(
        "--stderr",
        action="store_true",
        default=_env_flag("IOPROMPT_STDERR"),
        help="Write the prompt to stderr so stdout carries only the answer.",
    )
    parser.add_argument(
        "--mode",
        choices=("plain", "interactive"),
        default=os.getenv("IOPROMPT_MODE", "plain"),
        help="`plain` reads stdin directly, `interactive` uses prompt_toolkit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    io = _build_io(args.mode)
    message = args.message + "\n" if args.newline else args.message

    try:
        answer = io.read(message, error=args.stderr)
        if answer is None:
            return EXIT_END_OF_INPUT
        io.write(answer)
    except PromptIOError as exc:
        print(f"ioprompt: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK


def _build_io(mode: str) -> IOInterface:
    if mode == "interactive":
        # Deferred import so plain mode never touches the terminal driver
        from .ui import PromptToolkitIO

        return PromptToolkitIO()
    return StdIO()


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    if not value:
        return False
    return value.strip().lower() in _TRUTHY
