"""End-to-end integration tests for Adaptogen."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

import adaptogen
from adaptogen import (
    ClaudeParser,
    ConflictPolicy,
    ContentFrame,
    ParserConflictError,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
    UnsupportedModelError,
    create_default_registry,
    get_default_registry,
)


@pytest.mark.integration
class TestEndToEnd:
    """Default registry with the bundled parsers."""

    def test_default_registry_models(self):
        registry = create_default_registry()
        models = registry.list_models()

        assert models["claude"] == "claude"
        assert models["qwen"] == "qwen"
        assert models["accounts/fireworks/models/qwen3-30b-a3b"] == "qwen"

    def test_module_parse_dispatches_by_model(
        self, reset_default_registry, claude_response, qwen_tool_call_response
    ):
        claude_frame = adaptogen.parse(claude_response)
        qwen_frame = adaptogen.parse(qwen_tool_call_response)

        assert claude_frame.model == "claude"
        assert [block.type for block in claude_frame.blocks] == ["thinking", "text", "tool_use"]
        assert qwen_frame.model == "accounts/fireworks/models/qwen3-30b-a3b"
        assert [block.type for block in qwen_frame.blocks] == ["thinking", "tool_use"]

    def test_default_registry_is_shared(self, reset_default_registry):
        assert get_default_registry() is get_default_registry()

    def test_mixed_blocks_keep_source_order(self):
        raw = json.dumps({
            "id": "msg_order",
            "model": "claude",
            "content": [
                {"type": "text", "text": "Looking that up."},
                {"type": "tool_use", "id": "toolu_1", "name": "lookup", "input": {"q": "x"}},
                {"type": "tool_result", "tool_use_id": "toolu_1", "content": "result"},
            ]
        })

        frame = create_default_registry().parse(raw)

        assert frame == ContentFrame(
            id="msg_order",
            model="claude",
            blocks=[
                TextBlock(text="Looking that up."),
                ToolUseBlock(id="toolu_1", name="lookup", input={"q": "x"}),
                ToolResultBlock(tool_use_id="toolu_1", content="result"),
            ]
        )

    def test_shared_parser_instance_under_extra_identifiers(self):
        registry = create_default_registry()
        claude = ClaudeParser(models=["anthropic/claude-proxy"])
        registry.register_parser(claude)

        frame = registry.parse(json.dumps({
            "id": "msg_proxy",
            "model": "anthropic/claude-proxy",
            "content": [{"type": "thinking", "thinking": "hmm"}]
        }))

        assert frame.blocks == (ThinkingBlock(text="hmm"),)
        assert registry.get_parser("claude") is not claude

    def test_default_registry_reads_conflict_policy(self, reset_default_registry, monkeypatch):
        monkeypatch.setenv("ADAPTOGEN_CONFLICT_POLICY", "reject")

        registry = get_default_registry()

        assert registry.conflict_policy == ConflictPolicy.REJECT
        with pytest.raises(ParserConflictError):
            registry.register_parser(ClaudeParser(models=["claude"]))

    def test_unknown_model(self):
        with pytest.raises(UnsupportedModelError):
            create_default_registry().parse('{"id": "x", "model": "gpt-4o-mini"}')

    def test_concurrent_parsing(self, claude_response, qwen_tool_call_response):
        registry = create_default_registry()
        expected = {
            claude_response: registry.parse(claude_response),
            qwen_tool_call_response: registry.parse(qwen_tool_call_response),
        }
        inputs = [claude_response, qwen_tool_call_response] * 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(registry.parse, inputs))

        for raw, frame in zip(inputs, results):
            assert frame == expected[raw]
