"""Print a prompt, then read a single line of input.

Every function looks up ``sys.stdin``/``sys.stdout``/``sys.stderr`` at call
time unless a stream is passed explicitly, so callers and tests can inject
their own file objects.

End-of-input (a stream that delivers zero bytes) is reported as ``None``,
while an empty line is reported as ``""``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO

from .errors import PromptIOError

logger = logging.getLogger(__name__)


def read_line(stdin: Optional[TextIO] = None) -> str:
    """Read one raw line, terminator included.

    Returns an empty string once the stream is exhausted.
    """
    stream = stdin if stdin is not None else sys.stdin
    if stream is None:
        raise PromptIOError("stdin is not available", stage="read")
    try:
        return stream.readline()
    except (OSError, ValueError) as exc:
        logger.debug("reading from stdin failed: %s", exc)
        raise PromptIOError(f"failed reading from stdin: {exc}", stage="read") from exc


def strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` and, if it was there, one ``\\r`` before it."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def prompt(
    message: str = "",
    *args: Any,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Print ``message`` to stdout without a newline, then read a line.

    ``args``/``kwargs`` are applied with :meth:`str.format` when given::

        name = prompt("What's your favorite {}? >", "snack")
    """
    text = _render(message, args, kwargs)
    return _ask(text, resolve_stream(stdout, "stdout"), stdin, "stdout")


def promptln(
    message: str = "",
    *args: Any,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Like :func:`prompt`, but the message ends with a newline."""
    text = _render(message, args, kwargs) + "\n"
    return _ask(text, resolve_stream(stdout, "stdout"), stdin, "stdout")


def eprompt(
    message: str = "",
    *args: Any,
    stdin: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Like :func:`prompt`, but the message goes to stderr."""
    text = _render(message, args, kwargs)
    return _ask(text, resolve_stream(stderr, "stderr"), stdin, "stderr")


def epromptln(
    message: str = "",
    *args: Any,
    stdin: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Like :func:`eprompt`, but the message ends with a newline."""
    text = _render(message, args, kwargs) + "\n"
    return _ask(text, resolve_stream(stderr, "stderr"), stdin, "stderr")


def _render(message: str, args: tuple, kwargs: dict) -> str:
    if args or kwargs:
        return message.format(*args, **kwargs)
    return message


def resolve_stream(stream: Optional[TextIO], name: str) -> Optional[TextIO]:
    if stream is not None:
        return stream
    return getattr(sys, name)


def _ask(text: str, output: Optional[TextIO], stdin: Optional[TextIO], name: str) -> Optional[str]:
    if output is None:
        raise PromptIOError(f"{name} is not available", stage="write")
    try:
        output.write(text)
        output.flush()
    except (OSError, ValueError) as exc:
        logger.debug("writing prompt to %s failed: %s", name, exc)
        raise PromptIOError(f"failed writing to {name}: {exc}", stage="write") from exc
    logger.debug("prompted on %s with %r", name, text)

    line = read_line(stdin)
    if not line:
        logger.debug("end of input reached")
        return None
    return strip_line_terminator(line)
