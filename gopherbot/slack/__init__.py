"""Slack slash-command delayed responses."""

from .notifier import CallbackNotifier, extract_response_url
from .payloads import Attachment, SlackResponse, gopher_message

__all__ = [
    "Attachment",
    "CallbackNotifier",
    "SlackResponse",
    "extract_response_url",
    "gopher_message",
]
