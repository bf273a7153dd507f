import pytest

from tests.fixtures.mock_clients import RecordingTransport
from tests.fixtures.responses import completion_response
from tests.helpers import OPENAI_HOST, AIRTABLE_HOST


@pytest.fixture
def base_config():
    """Minimal configuration: no persona, no error label, no interaction logging."""
    from config import Config
    return Config(OPENAI_API_KEY="sk-test", OPENAI_MODEL="gpt-test", STATIC_DIR="does-not-exist")


@pytest.fixture
def persona_config(base_config):
    """Configuration with the persona message and sampling parameters enabled."""
    base_config.PERSONA_ENABLED = True
    base_config.PERSONA_PROMPT = "You are a test persona."
    return base_config


@pytest.fixture
def logging_config(base_config):
    """Configuration with Airtable interaction logging enabled."""
    base_config.INTERACTION_LOGGING_ENABLED = True
    base_config.AIRTABLE_API_KEY = "pat-test"
    base_config.AIRTABLE_BASE_ID = "appBase"
    base_config.AIRTABLE_TABLE_NAME = "Chat Log"
    return base_config


@pytest.fixture
def transport():
    """Recording transport answering the completion API with a fixed reply."""
    recorder = RecordingTransport()
    recorder.respond(OPENAI_HOST, 200, completion_response("stubbed reply"))
    recorder.respond(AIRTABLE_HOST, 200, {"records": [{"id": "rec1", "fields": {}}]})
    return recorder


@pytest.fixture
def http_clients_factory(transport):
    """Build an HTTPClientManager whose clients use the recording transport."""
    from utils.http_client import HTTPClientManager

    def build(config):
        return HTTPClientManager(config, transport=transport.build())
    return build


@pytest.fixture
def app_factory(http_clients_factory):
    """Build a TestClient for the given configuration."""
    from fastapi.testclient import TestClient
    from main import create_app

    clients = []

    def build(config):
        app = create_app(config, http_clients=http_clients_factory(config))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield build

    for client in clients:
        client.__exit__(None, None, None)

