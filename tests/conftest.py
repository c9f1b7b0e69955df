"""Shared pytest fixtures for Adaptogen tests."""

import json

import pytest

from adaptogen import registry as registry_module
from adaptogen.config.constants import CONFLICT_POLICY_ENV_VAR, LOG_LEVEL_ENV_VAR
from adaptogen.registry import ParserRegistry
from tests.helpers.mock_parsers import DemoParser


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests across modules")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ambient configuration out of the tests."""
    monkeypatch.delenv(CONFLICT_POLICY_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def reset_default_registry(monkeypatch):
    """Drop the process-wide registry so it is rebuilt inside the test."""
    monkeypatch.setattr(registry_module, "_default_registry", None)


@pytest.fixture
def registry():
    """Empty registry with the default conflict policy."""
    return ParserRegistry()


@pytest.fixture
def demo_registry(registry):
    """Registry with the demo text parser registered."""
    registry.register_parser(DemoParser())
    return registry


@pytest.fixture
def claude_response():
    """Anthropic Messages body with text, tool use and thinking."""
    return json.dumps({
        "id": "msg_01XFDUDYJgAACzvnptvVoYEL",
        "type": "message",
        "role": "assistant",
        "model": "claude",
        "content": [
            {"type": "thinking", "thinking": "The user wants the weather.", "signature": "sig"},
            {"type": "text", "text": "Let me check the weather."},
            {
                "type": "tool_use",
                "id": "toolu_01A09q90qw90lq917835lq9",
                "name": "get_weather",
                "input": {"location": "San Francisco, CA", "unit": "celsius"}
            }
        ],
        "stop_reason": "tool_use",
        "usage": {"input_tokens": 12, "output_tokens": 30}
    })


@pytest.fixture
def qwen_tool_call_response():
    """Fireworks-hosted Qwen3 completion with inline reasoning and a tool call."""
    return json.dumps({
        "id": "example-id",
        "object": "chat.completion",
        "created": 1746977262,
        "model": "accounts/fireworks/models/qwen3-30b-a3b",
        "choices": [{
            "index": 0,
            "message": {
                "role": "assistant",
                "content": "<think>\nThe user is asking for the capital of France. "
                           "I should call search_capital.\n</think>\n\n",
                "tool_calls": [{
                    "index": 0,
                    "id": "call_Qi2Is8SYTdRWjAToAViVLGeE",
                    "type": "function",
                    "function": {
                        "name": "search_capital",
                        "arguments": "{\"country\": \"France\"}"
                    }
                }]
            },
            "finish_reason": "tool_calls"
        }],
        "usage": {"prompt_tokens": 172, "total_tokens": 290, "completion_tokens": 118}
    })
