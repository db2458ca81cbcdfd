import asyncio
from types import SimpleNamespace

import pytest

from swiftjobs.services.analysis.llm_client import LLMClient, LLMError, LLMSettings, SYSTEM_PROMPT


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=message)],
            usage=SimpleNamespace(total_tokens=42)
        )


class FakeMessages:
    def __init__(self, text):
        self.text = text
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text=self.text)])


def _client_with(provider, sdk):
    client = LLMClient(LLMSettings(provider=provider, model="test-model", api_key="key"))
    client._client = sdk
    return client


def test_unknown_provider_is_rejected():
    with pytest.raises(ValueError):
        LLMClient(LLMSettings(provider="mystery"))


def test_complete_sends_system_and_user_messages():
    completions = FakeCompletions(content='{"score": 80}')
    client = _client_with("groq", SimpleNamespace(chat=SimpleNamespace(completions=completions)))

    reply = asyncio.run(client.complete("Score this job match"))

    assert reply == '{"score": 80}'
    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert call["messages"][1] == {"role": "user", "content": "Score this job match"}
    assert call["temperature"] == 0.5
    assert call["max_tokens"] == 1500


def test_complete_returns_empty_string_for_empty_reply():
    completions = FakeCompletions(content=None)
    client = _client_with("openai", SimpleNamespace(chat=SimpleNamespace(completions=completions)))

    assert asyncio.run(client.complete("prompt")) == ""


def test_complete_wraps_provider_errors():
    completions = FakeCompletions(error=RuntimeError("rate limited"))
    client = _client_with("groq", SimpleNamespace(chat=SimpleNamespace(completions=completions)))

    with pytest.raises(LLMError, match="AI analysis failed"):
        asyncio.run(client.complete("prompt"))


def test_complete_with_anthropic_passes_system_prompt():
    messages = FakeMessages('{"score": 77}')
    client = _client_with("anthropic", SimpleNamespace(messages=messages))

    assert asyncio.run(client.complete("prompt", system_prompt="Be brief")) == '{"score": 77}'
    assert messages.calls[0]["system"] == "Be brief"
    assert messages.calls[0]["messages"] == [{"role": "user", "content": "prompt"}]


@pytest.mark.parametrize("provider,key_env", [
    ("groq", "GROQ_API_KEY"),
    ("openai", "OPENAI_API_KEY"),
    ("anthropic", "ANTHROPIC_API_KEY"),
])
def test_missing_provider_key_fails_without_borrowing_another(monkeypatch, provider, key_env):
    for env in ("GROQ_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
        monkeypatch.setenv(env, "other-provider-key")
    monkeypatch.delenv(key_env)
    client = LLMClient(LLMSettings(provider=provider))

    with pytest.raises(LLMError, match="AI analysis failed"):
        asyncio.run(client.complete("prompt"))

    assert client._client is None
