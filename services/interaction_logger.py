"""
Interaction logger writing each completed exchange to Airtable.
Best-effort: failures are reported through app_logger and never raised.
"""
import httpx

from config import Config
from models.chat_models import LogRecord
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class InteractionLogger:
    """Appends interaction records to the configured Airtable table."""

    def __init__(self, config: Config, http_clients: HTTPClientManager):
        self.config = config
        self.http_clients = http_clients

    async def log(self, user_input: str, prompt: str, response: str) -> bool:
        """
        Create one record for a completed exchange.

        Args:
            user_input: Raw user input from the client
            prompt: Prompt that was sent to the model
            response: Model reply

        Returns:
            True if the record was created, False otherwise
        """
        record = LogRecord(user_input=user_input, prompt=prompt, response=response)

        try:
            client = self.http_clients.get_store_client()
            result = await client.post(
                self.config.airtable_table_url,
                json=record.to_json(),
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.config.AIRTABLE_API_KEY}",
                }
            )
            result.raise_for_status()
        except httpx.HTTPStatusError as e:
            app_logger.error(
                f"Failed to log interaction to Airtable (status {e.response.status_code}): {e.response.text}"
            )
            return False
        except Exception as e:
            app_logger.error(f"Failed to log interaction to Airtable: {e!r}")
            return False

        app_logger.info("Interaction logged to Airtable")
        return True
