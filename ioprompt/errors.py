from __future__ import annotations

from typing import Literal

Stage = Literal["write", "read"]


class PromptIOError(OSError):
    """Raised when a prompt cannot be written or an answer cannot be read.

    ``stage`` is ``"write"`` for failures while printing or flushing the
    prompt and ``"read"`` for failures on the input stream. The underlying
    exception is available as ``__cause__``.
    """

    def __init__(self, message: str, stage: Stage) -> None:
        super().__init__(message)
        self.stage: Stage = stage
