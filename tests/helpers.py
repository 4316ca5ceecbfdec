"""Test doubles shared across the suite."""

import threading
from collections.abc import Callable
from typing import Any

PRIMARY = "gemini-3-pro-preview"
FALLBACK = "gemini-2.5-flash"


class FakeClock:
    """Controllable epoch-seconds clock."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Upstream double returning scripted outcomes per model tier.

    An outcome is a response string, an exception instance to raise, or a
    zero-argument callable producing the response.
    """

    def __init__(self, outcomes: dict[str, Any]) -> None:
        self.outcomes = outcomes
        self.calls: list[str | None] = []

    def generate(self, prompt: str, model: str | None = None, use_search: bool = True) -> str:
        self.calls.append(model)
        outcome = self.outcomes[model]
        if isinstance(outcome, BaseException):
            raise outcome
        if callable(outcome):
            return outcome()
        return outcome


class Gate:
    """Holds scripted upstream calls open until released."""

    def __init__(self) -> None:
        self._open = threading.Event()

    def __call__(self, response: str = "[]") -> Callable[[], str]:
        def wait() -> str:
            self._open.wait(timeout=5)
            return response

        return wait

    def release(self) -> None:
        self._open.set()


def join_upstream_threads(timeout: float = 2.0) -> None:
    """Wait for upstream calls that lost a timeout race to finish."""
    for thread in threading.enumerate():
        if thread.name.startswith("codeeval-upstream"):
            thread.join(timeout)
