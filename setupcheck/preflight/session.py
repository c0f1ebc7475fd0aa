"""
Interactive Session

The single input channel used for manual confirmation. It is opened once,
handed to the check that needs it, and closed right after use.
"""

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import Prompt


class LinePrompt(Prompt):
    """Free-text prompt that leaves the caller's prompt text untouched."""
    prompt_suffix = ""


class SessionClosedError(RuntimeError):
    """Input was requested after the session was closed."""
    pass


class InteractiveSession:
    """
    Single-use line input bound to a rich console.

    The stream is only closed on close() when the session owns it;
    stdin is never closed out from under the process.
    """

    def __init__(
        self,
        console: Console,
        stream: Optional[TextIO] = None,
        owns_stream: bool = False,
    ):
        """
        Initialize the session.

        Args:
            console: Rich console prompts are written to
            stream: Input stream. Defaults to stdin
            owns_stream: Close the stream together with the session
        """
        self.console = console
        self.stream = stream if stream is not None else sys.stdin
        self.owns_stream = owns_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, prompt: str) -> str:
        """
        Read one line of input.

        Raises:
            SessionClosedError: If the session was already closed
        """
        if self._closed:
            raise SessionClosedError("Interactive session is closed")
        return LinePrompt.ask(prompt, console=self.console, stream=self.stream)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self.owns_stream:
            self.stream.close()

    def __enter__(self) -> "InteractiveSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def is_affirmative(answer: str) -> bool:
    """Any answer containing a "y", in either case, means yes."""
    return "y" in answer.lower()
