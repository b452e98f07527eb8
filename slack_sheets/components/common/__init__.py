"""Shared clients for external services."""

from .slack_client import SlackClient, SlackError, SlackApiError, SlackTransportError

__all__ = ['SlackClient', 'SlackError', 'SlackApiError', 'SlackTransportError']
