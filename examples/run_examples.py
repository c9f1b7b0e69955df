"""
Example: Normalizing Claude and Qwen responses

This example registers the bundled parsers, parses one response from each
provider through the same registry call and prints the normalized blocks.
"""

from adaptogen import ParseError, TextBlock, ThinkingBlock, ToolUseBlock, create_default_registry


CLAUDE_RESPONSE = """{
    "id": "example-claude-id",
    "model": "claude",
    "content": [
        {"type": "text", "text": "Hello from Claude!"}
    ]
}"""

QWEN_RESPONSE = (
    '{"id":"example-id","object":"chat.completion","created":1746977262,'
    '"model":"accounts/fireworks/models/qwen3-30b-a3b","choices":[{"index":0,'
    '"message":{"role":"assistant","content":"<think>\\nThe user is asking for the capital '
    'of France. There is a search_capital function, so I will call it.\\n</think>\\n\\n",'
    '"tool_calls":[{"index":0,"id":"call_Qi2Is8SYTdRWjAToAViVLGeE","type":"function",'
    '"function":{"name":"search_capital","arguments":"{\\"country\\": \\"France\\"}"}}]},'
    '"finish_reason":"tool_calls"}],"usage":{"prompt_tokens":172,"total_tokens":290,'
    '"completion_tokens":118}}'
)


def describe(raw_response: str) -> None:
    registry = create_default_registry()
    try:
        frame = registry.parse(raw_response)
    except ParseError as e:
        print(f"Error parsing response ({e.kind}): {e}")
        return

    print(f"Parsed response: id={frame.id} model={frame.model} blocks={len(frame.blocks)}")
    for i, block in enumerate(frame.blocks):
        if isinstance(block, TextBlock):
            print(f"  Block {i}: Text - {block.text}")
        elif isinstance(block, ThinkingBlock):
            print(f"  Block {i}: Thinking - {block.text!r}")
        elif isinstance(block, ToolUseBlock):
            print(f"  Block {i}: Tool use - {block.name}({block.input})")
        else:
            print(f"  Block {i}: {block.type}")


def main():
    print("=== Claude ===")
    describe(CLAUDE_RESPONSE)
    print("\n=== Qwen ===")
    describe(QWEN_RESPONSE)
    print("\n=== Unknown model ===")
    describe('{"id": "x", "model": "unknown-xyz"}')


if __name__ == "__main__":
    main()
