from __future__ import annotations

from typing import List, Optional, TextIO

from .errors import PromptIOError
from .prompt import eprompt, prompt, resolve_stream


class IOInterface:
    """Abstraction over terminal IO to simplify testing."""

    def read(self, message: str = "", error: bool = False) -> Optional[str]:  # pragma: no cover - interface contract
        raise NotImplementedError

    def write(self, text: str = "") -> None:  # pragma: no cover - interface contract
        raise NotImplementedError


class StdIO(IOInterface):
    """stdin/stdout/stderr implementation backed by the prompt functions.

    Streams left as ``None`` resolve to the process streams on each call.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    def read(self, message: str = "", error: bool = False) -> Optional[str]:
        if error:
            return eprompt(message, stdin=self._stdin, stderr=self._stderr)
        return prompt(message, stdin=self._stdin, stdout=self._stdout)

    def write(self, text: str = "") -> None:
        stream = resolve_stream(self._stdout, "stdout")
        if stream is None:
            raise PromptIOError("stdout is not available", stage="write")
        try:
            stream.write(text + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            raise PromptIOError(f"failed writing to stdout: {exc}", stage="write") from exc


class BufferedIO(IOInterface):
    """Test-double IO that consumes scripted input and captures output."""

    def __init__(self, scripted_inputs: List[str]):
        self._inputs = list(scripted_inputs)
        self.outputs: List[str] = []

    def read(self, message: str = "", error: bool = False) -> Optional[str]:
        self.outputs.append(message)
        if not self._inputs:
            return None
        return self._inputs.pop(0)

    def write(self, text: str = "") -> None:
        self.outputs.append(text)
