"""Minimal Slack Web API client - one blocking POST per call, no retries."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union
import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://slack.com/api/'
DOCS_BASE_URL = 'https://api.slack.com/methods/'


class SlackError(Exception):
    """Base exception for Slack API errors."""
    pass


class SlackTransportError(SlackError):
    """Raised when the HTTP request fails or the response is not JSON."""
    pass


class SlackApiError(SlackError):
    """
    Raised when Slack answers with ``ok: false``.

    Attributes:
        error: Slack error code (e.g. 'channel_not_found')
        api_method: API method that failed (e.g. 'conversations.invite')
        docs_url: Documentation page listing the method's error codes
        response: Decoded response body
    """

    def __init__(self, error: str, api_method: str, response: Optional[Dict] = None):
        self.error = error
        self.api_method = api_method
        self.docs_url = f"{DOCS_BASE_URL}{api_method}#errors"
        self.response = response or {}
        super().__init__(
            f"Slack API error '{error}' from {api_method}. "
            f"Check the error code: {self.docs_url}"
        )


def _join_ids(ids: Union[str, Sequence[str]]) -> str:
    """Slack takes multiple user IDs as one comma-separated string."""
    if isinstance(ids, str):
        return ids
    return ','.join(ids)


def _form_value(value: Any) -> Any:
    # Form encoding would send Python's True/False; Slack expects true/false
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


class SlackClient:
    """
    Minimal client for the Slack Web API.

    Example usage:
        client = SlackClient('xoxb-...')

        channels = client.list_channels()
        client.post_message('#general', 'Hello')
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Slack API client.

        Args:
            token: Bot or user OAuth token
            base_url: API endpoint prefix (default: https://slack.com/api/)
            session: Optional requests session (injected in tests)
        """
        if not token:
            raise ValueError("Slack token is required")

        self.token = token
        self.base_url = base_url.rstrip('/') + '/'
        self.session = session or requests.Session()
        self.session.headers.update({'Authorization': f'Bearer {self.token}'})

    def request(self, api_method: str, payload: Optional[Dict[str, Any]] = None) -> Dict:
        """
        Call an API method.

        Args:
            api_method: Slack API method (e.g. 'conversations.list')
            payload: Form parameters

        Returns:
            Decoded JSON response

        Raises:
            SlackTransportError: If the request fails or the body is not JSON
            SlackApiError: If the response has ok: false
        """
        url = f"{self.base_url}{api_method}"
        data = {key: _form_value(value) for key, value in (payload or {}).items()}

        try:
            response = self.session.post(url, data=data)
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.RequestException as e:
            raise SlackTransportError(f"Request to {api_method} failed: {str(e)}") from e
        except ValueError as e:
            raise SlackTransportError(f"Invalid JSON from {api_method}: {str(e)}") from e

        logger.debug(f"Slack API ({api_method}) ok: {body.get('ok')} response: {response.text}")

        if body.get('ok') is False:
            raise SlackApiError(body.get('error', 'unknown_error'), api_method, body)

        return body

    def list_channels(
        self,
        exclude_archived: bool = True,
        types: str = 'public_channel,private_channel',
        limit: int = 100
    ) -> List[Dict]:
        """
        List channels (first page only).

        Args:
            exclude_archived: Skip archived channels (default: True)
            types: Comma-separated channel types
            limit: Maximum number of channels to return (default: 100)

        Returns:
            List of channel objects
        """
        payload = {
            'exclude_archived': exclude_archived,
            'types': types,
            'limit': limit
        }
        return self.request('conversations.list', payload).get('channels', [])

    def list_users(self) -> List[Dict]:
        """List workspace members (first page only)."""
        return self.request('users.list').get('members', [])

    def create_channel(self, name: str, is_private: bool = True) -> Dict:
        """
        Create a channel.

        Args:
            name: Channel name
            is_private: Create as a private channel (default: True)

        Returns:
            Created channel object
        """
        payload = {'name': name, 'is_private': is_private}
        return self.request('conversations.create', payload)['channel']

    def invite_to_channel(self, channel_id: str, user_ids: Union[str, Sequence[str]]) -> Dict:
        """Invite users to a channel. Returns the full response."""
        payload = {'channel': channel_id, 'users': _join_ids(user_ids)}
        return self.request('conversations.invite', payload)

    def open_direct_message(self, user_ids: Union[str, Sequence[str]]) -> Dict:
        """Open a DM or multi-person DM. Returns the conversation object."""
        payload = {'users': _join_ids(user_ids)}
        return self.request('conversations.open', payload)['channel']

    def post_message(self, channel_id: str, text: str) -> Dict:
        """
        Post a message.

        Args:
            channel_id: Channel ID or name (e.g. '#general')
            text: Message text

        Returns:
            Full response (includes 'ts' and 'message')
        """
        payload = {'channel': channel_id, 'text': text}
        return self.request('chat.postMessage', payload)
