"""
Normalized content model shared by every provider parser.

A ``ContentFrame`` is the provider-independent result of parsing one raw
response. Its ``blocks`` are a closed tagged union discriminated by
``type``; parsers can only produce these four shapes.
"""

from typing import Annotated, Any, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TextBlock(_Block):
    """Literal generated text."""
    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(_Block):
    """A tool/function invocation requested by the model."""
    type: Literal["tool_use"] = "tool_use"
    id: str = Field(..., description="Identifier of this invocation within the frame")
    name: str = Field(..., description="Name of the tool being called")
    input: Any = Field(..., description="Call arguments, passed through unmodified")


class ToolResultBlock(_Block):
    """Result of executing an earlier tool use."""
    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str = Field(..., description="Id of the corresponding tool use")
    content: Any = Field(..., description="Result text or structured value")
    is_error: bool = False


class ThinkingBlock(_Block):
    """Internal reasoning surfaced by the provider."""
    type: Literal["thinking"] = "thinking"
    text: str


ContentBlock = Annotated[
    Union[TextBlock, ToolUseBlock, ToolResultBlock, ThinkingBlock],
    Field(discriminator="type"),
]

content_block_adapter: TypeAdapter = TypeAdapter(ContentBlock)


class ContentFrame(BaseModel):
    """
    One normalized model response.

    Frames are immutable once built: the model is frozen and ``blocks`` is
    stored as a tuple in generation order.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Response identifier")
    model: str = Field(..., description="Model that produced the response")
    blocks: Tuple[ContentBlock, ...] = Field(default_factory=tuple)
