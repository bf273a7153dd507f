OPENAI_HOST = "api.openai.com"
AIRTABLE_HOST = "api.airtable.com"


def assert_error_response(response, status_code, message=None):
    """Assert the response is an error with exactly the {"error": ...} shape."""
    assert response.status_code == status_code, response.text
    payload = response.json()
    assert set(payload) == {"error"}, f"Unexpected error body: {payload}"
    if message is not None:
        assert payload["error"] == message


def assert_ends_with_prompt(messages, prompt):
    """Assert the outbound message list ends in a user entry equal to the prompt."""
    assert messages, "Outbound message list is empty"
    assert messages[-1] == {"role": "user", "content": prompt}
