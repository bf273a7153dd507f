"""
Constants and system prompts for the OpenAI Chat Relay application.
"""

DEFAULT_PERSONA_PROMPT = """You are a friendly and knowledgeable assistant.
Answer clearly and concisely, stay on the topic of the user's question,
and say so plainly when you are not sure about something."""

# Sampling parameters sent alongside the persona message
SAMPLING_PARAMETERS = {
    "temperature": 0.7,
    "max_tokens": 500,
    "top_p": 1.0,
    "frequency_penalty": 0.0,
    "presence_penalty": 0.0,
}

UPSTREAM_ERROR_LABEL = "Error communicating with OpenAI API"


class Roles:
    """Message roles accepted by the completion API."""
    USER = "user"
    SYSTEM = "system"


class LogFields:
    """Column names of the interaction log table."""
    USER_INPUT = "User Input"
    PROMPT = "Prompt"
    RESPONSE = "Response"
