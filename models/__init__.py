"""
Models package exports.
"""
from models.api_models import Message, ChatRequest, ChatResponse, ErrorResponse
from models.chat_models import CompletionPayload, LogRecord

__all__ = [
    'Message',
    'ChatRequest',
    'ChatResponse',
    'ErrorResponse',
    'CompletionPayload',
    'LogRecord'
]
