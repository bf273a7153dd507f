"""
Chat service containing core chat processing logic.
Handles request validation, message assembly and error message shaping.
"""
from config import Config
from errors import ChatValidationError, CompletionError
from models.api_models import ChatRequest
from models.chat_models import CompletionPayload
from utils.constants import SAMPLING_PARAMETERS, UPSTREAM_ERROR_LABEL, Roles


class ChatService:
    """Service for handling chat logic."""

    @staticmethod
    def _is_blank(value: str | None) -> bool:
        return value is None or not value.strip()

    @staticmethod
    def validate_request(request: ChatRequest, config: Config) -> None:
        """
        Check required fields before any outbound call is made.

        Raises:
            ChatValidationError: prompt missing, or userInput missing while
                interaction logging is enabled
        """
        if config.INTERACTION_LOGGING_ENABLED:
            if ChatService._is_blank(request.user_input) or ChatService._is_blank(request.prompt):
                raise ChatValidationError("User input and prompt are required")
            return

        if ChatService._is_blank(request.prompt):
            raise ChatValidationError("Prompt is required")

    @staticmethod
    def prepare_messages(request: ChatRequest, config: Config) -> list[dict]:
        """
        Prepare the messages list: persona message (if enabled), history in
        order, then the user prompt.
        """
        messages = []

        if config.PERSONA_ENABLED:
            messages.append({"role": Roles.SYSTEM, "content": config.PERSONA_PROMPT})

        for message in request.previous_messages:
            messages.append({"role": message.role, "content": message.content})

        messages.append({"role": Roles.USER, "content": request.prompt})
        return messages

    @staticmethod
    def build_payload(request: ChatRequest, config: Config) -> CompletionPayload:
        """Build the completion payload for a validated request."""
        return CompletionPayload(
            model=config.OPENAI_MODEL,
            messages=ChatService.prepare_messages(request, config),
            sampling=dict(SAMPLING_PARAMETERS) if config.PERSONA_ENABLED else None
        )

    @staticmethod
    def format_error_message(error: CompletionError, config: Config) -> str:
        """Client-facing message for a failed completion."""
        if config.ERROR_LABEL_ENABLED:
            return f"{UPSTREAM_ERROR_LABEL}: {error.message}"
        return error.message
