"""
Data models for chat processing.
Contains the outbound completion payload and the interaction log record.
"""
from dataclasses import dataclass
from typing import Optional

from utils.constants import LogFields


@dataclass
class CompletionPayload:
    """Request body sent to the chat-completion API."""
    model: str
    messages: list[dict]
    sampling: Optional[dict] = None

    def to_json(self) -> dict:
        """Serialize to the completion API's JSON shape."""
        body = {"model": self.model, "messages": self.messages}
        if self.sampling:
            body.update(self.sampling)
        return body


@dataclass
class LogRecord:
    """One row of the interaction log table."""
    user_input: str
    prompt: str
    response: str

    def to_fields(self) -> dict:
        """Map to the table's column names."""
        return {
            LogFields.USER_INPUT: self.user_input,
            LogFields.PROMPT: self.prompt,
            LogFields.RESPONSE: self.response,
        }

    def to_json(self) -> dict:
        """Serialize to the store's record-creation body."""
        return {"records": [{"fields": self.to_fields()}]}
