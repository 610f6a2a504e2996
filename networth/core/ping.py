"""Ping utility used by the API health-check."""

PING_MESSAGE = "pong"


def get_ping_message() -> str:
    return PING_MESSAGE
