"""
Adaptogen constants

Environment variable names and the model identifiers claimed by the
bundled reference parsers. Identifiers are matched exactly and are
case-sensitive.
"""

# Environment variables read by RegistrySettings.from_env()
CONFLICT_POLICY_ENV_VAR = "ADAPTOGEN_CONFLICT_POLICY"
LOG_LEVEL_ENV_VAR = "ADAPTOGEN_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

# Anthropic Messages API format
CLAUDE_MODELS = (
    "claude",
    "claude-3-haiku-20240307",
    "claude-3-5-haiku-20241022",
    "claude-3-5-sonnet-20241022",
    "claude-3-7-sonnet-20250219",
    "claude-sonnet-4-20250514",
    "claude-opus-4-20250514",
)

# OpenAI-compatible chat completions format, as served by Fireworks
QWEN_MODELS = (
    "qwen",
    "accounts/fireworks/models/qwen3-30b-a3b",
    "accounts/fireworks/models/qwen3-235b-a22b",
)

THINK_OPEN_TAG = "<think>"
THINK_CLOSE_TAG = "</think>"
