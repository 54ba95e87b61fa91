from __future__ import annotations

import sys
from typing import Dict, Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.history import DummyHistory
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output, create_output
from prompt_toolkit.styles import Style

from .io import IOInterface


class PromptToolkitIO(IOInterface):
    """prompt_toolkit-based line reader for interactive terminals.

    Reads exactly one line per call; history is disabled.
    """

    def __init__(
        self,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ) -> None:
        self._input = input
        self._output = output
        self._sessions: Dict[bool, PromptSession] = {}
        self._style = Style.from_dict(
            {
                "prompt": "bold",
            }
        )

    def read(self, message: str = "", error: bool = False) -> Optional[str]:
        session = self._require_session(error)
        try:
            return session.prompt([("class:prompt", message)])
        except EOFError:
            return None

    def write(self, text: str = "") -> None:
        print_formatted_text(text, output=self._output)

    def _require_session(self, error: bool) -> PromptSession:
        # An explicit output is shared by both targets.
        to_stderr = error and self._output is None
        session = self._sessions.get(to_stderr)
        if session is None:
            output = create_output(stdout=sys.stderr) if to_stderr else self._output
            session = PromptSession(
                history=DummyHistory(),
                input=self._input,
                output=output,
                style=self._style,
            )
            self._sessions[to_stderr] = session
        return session
