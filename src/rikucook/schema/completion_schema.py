from pydantic import BaseModel
from typing import List, Optional


class CompletionMessage(BaseModel):
    role: str = "user"
    content: str


class CompletionRequest(BaseModel):
    model: str
    max_tokens: int
    messages: List[CompletionMessage]


class ContentBlock(BaseModel):
    type: Optional[str] = None
    text: Optional[str] = None


class CompletionResponse(BaseModel):
    content: List[ContentBlock]

    def joined_text(self) -> str:
        # Blocks that are not text (tool use, thinking, untyped) still take a slot, as empty text
        return "\n".join(
            (block.text or "") if block.type == "text" else "" for block in self.content
        )
