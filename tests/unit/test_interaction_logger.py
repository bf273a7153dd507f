import pytest
from unittest.mock import MagicMock

from services.interaction_logger import InteractionLogger
from tests.fixtures.mock_clients import RecordingTransport
from tests.fixtures.responses import AIRTABLE_CREATED_RESPONSE
from tests.helpers import AIRTABLE_HOST
from utils.http_client import HTTPClientManager


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def interaction_logger(logging_config, recorder):
    return InteractionLogger(logging_config, HTTPClientManager(logging_config, transport=recorder.build()))


@pytest.mark.anyio
async def test_log_creates_one_record(interaction_logger, recorder):
    """Given a completed exchange, log should create one record with the three fields."""
    recorder.respond(AIRTABLE_HOST, 200, AIRTABLE_CREATED_RESPONSE)

    assert await interaction_logger.log("hi there", "Hello", "Hi! How can I help?") is True

    requests = recorder.requests_to(AIRTABLE_HOST)
    assert len(requests) == 1
    assert str(requests[0].url) == "https://api.airtable.com/v0/appBase/Chat%20Log"
    assert requests[0].headers["Authorization"] == "Bearer pat-test"
    assert recorder.json_sent_to(AIRTABLE_HOST) == {
        "records": [
            {"fields": {"User Input": "hi there", "Prompt": "Hello", "Response": "Hi! How can I help?"}}
        ]
    }


@pytest.mark.anyio
@pytest.mark.parametrize("status_code", [401, 422, 500])
async def test_log_swallows_store_rejections(interaction_logger, recorder, status_code):
    """Given the store rejects the record, log should return False without raising."""
    recorder.respond(AIRTABLE_HOST, status_code, {"error": {"type": "INVALID_REQUEST"}})

    assert await interaction_logger.log("u", "p", "r") is False
    assert len(recorder.requests_to(AIRTABLE_HOST)) == 1


@pytest.mark.anyio
async def test_log_swallows_transport_errors(interaction_logger, recorder):
    """Given the store is unreachable, log should return False without raising."""
    recorder.fail(AIRTABLE_HOST)

    assert await interaction_logger.log("u", "p", "r") is False


@pytest.mark.anyio
async def test_log_swallows_unexpected_errors(logging_config, mocker):
    """Given any other failure, log should report it and return False."""
    http_clients = MagicMock()
    http_clients.get_store_client.side_effect = RuntimeError("client closed")
    error_log = mocker.patch("services.interaction_logger.app_logger.error")

    interaction_logger = InteractionLogger(logging_config, http_clients)

    assert await interaction_logger.log("u", "p", "r") is False
    error_log.assert_called_once()
    assert "client closed" in error_log.call_args.args[0]
