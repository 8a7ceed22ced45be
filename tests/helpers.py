from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Optional


class FakeSdk:
    """Stands in for openai.OpenAI: records requests and replays one reply."""

    def __init__(self, reply: Optional[str] = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        msg = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=msg)])

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["messages"][0]["content"]
