"""
Completion service for the OpenAI Chat Completions API.
Sends one request per call and turns failures into CompletionError.
"""
import httpx

from config import Config
from errors import CompletionError
from models.chat_models import CompletionPayload
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class CompletionClient:
    """Client for the chat-completion endpoint."""

    def __init__(self, config: Config, http_clients: HTTPClientManager):
        self.config = config
        self.http_clients = http_clients

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.OPENAI_API_KEY}",
        }

    async def complete(self, payload: CompletionPayload) -> str:
        """
        Send the payload and return the first choice's message content.

        Args:
            payload: Outbound completion payload

        Returns:
            Reply text generated by the model

        Raises:
            CompletionError: on transport failure (500) or upstream rejection
                (upstream status and its error message)
        """
        client = self.http_clients.get_completion_client()
        app_logger.info(f"Sending request to OpenAI API (model: {payload.model}, messages: {len(payload.messages)})")

        try:
            response = await client.post(
                self.config.OPENAI_API_URL,
                json=payload.to_json(),
                headers=self._headers()
            )
        except httpx.RequestError as e:
            message = str(e) or type(e).__name__
            app_logger.error(f"OpenAI API transport error: {message}")
            raise CompletionError(500, message) from e

        if response.status_code >= 400:
            message = self._extract_error_message(response)
            app_logger.error(f"OpenAI API error (status {response.status_code}): {message}")
            raise CompletionError(response.status_code, message)

        content = self._extract_content(response)
        app_logger.info(f"Response from OpenAI: {len(content)} characters")
        return content

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Read error.message from an error body, falling back to a generic status message."""
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error

        app_logger.error(f"Unstructured OpenAI API error body (status {response.status_code}): {response.text}")
        return f"Request failed with status code {response.status_code}"

    @staticmethod
    def _extract_content(response: httpx.Response) -> str:
        """Read choices[0].message.content from a successful reply."""
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            app_logger.error(f"Malformed OpenAI API response: {e!r}")
            raise CompletionError(500, "Malformed response from completion API") from e

        if not isinstance(content, str):
            app_logger.error(f"OpenAI API reply has no text content: {content!r}")
            raise CompletionError(500, "Malformed response from completion API")

        return content
