from __future__ import annotations

from types import SimpleNamespace

import pytest

XLIFF_OK = """<?xml version="1.0" encoding="UTF-8"?>
<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
  <file source-language="en" target-language="fr" datatype="plaintext" original="app">
    <body>
      <trans-unit id="greeting">
        <source>Hello &amp; welcome</source>
        <target>Bonjour &amp; bienvenue</target>
      </trans-unit>
    </body>
  </file>
</xliff>"""


class FakeCompletions:
    """Stands in for `AsyncOpenAI().chat.completions`."""

    def __init__(self, reply: str | None = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(reply: str | None = None, error: Exception | None = None):
    completions = FakeCompletions(reply, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def xliff_ok() -> str:
    return XLIFF_OK


@pytest.fixture
def xliff_broken() -> str:
    # control char, bare ampersand, bare "<" and a truncated closing tag
    return XLIFF_OK.replace("Hello &amp; welcome", "Tom & Jerry\x07 < 3")[:-1]
