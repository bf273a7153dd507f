"""
Pydantic data models for API requests and responses.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """Chat message model."""
    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    """Chat request body. Required fields are checked by ChatService.validate_request."""
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    user_input: Optional[str] = Field(None, alias="userInput")
    previous_messages: List[Message] = Field(default_factory=list, alias="previousMessages")


class ChatResponse(BaseModel):
    """Successful chat reply."""
    response: str


class ErrorResponse(BaseModel):
    """Error body returned for every failed chat request."""
    error: str
