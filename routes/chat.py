"""
Route handlers for chat operations.
Handles the /api/chat endpoint.
"""
from fastapi import APIRouter, BackgroundTasks, Request
from models.api_models import ChatRequest, ChatResponse, ErrorResponse
from services.chat_service import ChatService
from utils.logger import app_logger

router = APIRouter()


@router.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def chat(body: ChatRequest, request: Request, background_tasks: BackgroundTasks):
    """
    Relay a prompt to the completion API and return the reply.

    ChatValidationError and CompletionError propagate to the handlers
    registered in main.py.
    """
    state = request.app.state
    config = state.config

    app_logger.info(f"Received chat request (prompt: {len(body.prompt or '')} chars, history: {len(body.previous_messages)} messages)")
    ChatService.validate_request(body, config)

    payload = ChatService.build_payload(body, config)
    reply = await state.completion_client.complete(payload)

    if state.interaction_logger is not None:
        background_tasks.add_task(state.interaction_logger.log, body.user_input, body.prompt, reply)

    return ChatResponse(response=reply)
