"""MessageBird SMS notifier implementing :class:`NotifierPort`.

Purpose
-------
Hand :class:`OutgoingAlert` messages to the MessageBird REST API and report
the outcome as a :class:`DeliveryResult` value.

Contents
--------
* :class:`MessageBirdNotifier` - httpx-based client for ``POST /messages``.

System Role
-----------
The only code that talks to the external notification medium. Network,
authentication, quota and validation failures are mapped to failed results;
nothing raised by httpx escapes :meth:`MessageBirdNotifier.send`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lib_log_fanout.application.ports.notifier import NotifierPort
from lib_log_fanout.domain.alerts import DEFAULT_TIMEOUT_SECONDS, DeliveryResult, OutgoingAlert
from lib_log_fanout.domain.errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rest.messagebird.com"
MESSAGES_PATH = "/messages"


class MessageBirdNotifier(NotifierPort):
    """Send SMS alerts through the MessageBird messages endpoint.

    Parameters
    ----------
    api_key:
        MessageBird access key, sent as ``Authorization: AccessKey <key>``.
    base_url:
        API root; override for sandboxes or tests.
    timeout:
        Upper bound in seconds for one request. A timeout is reported as a
        failed delivery like any other error.
    client:
        Optional pre-built :class:`httpx.Client`; the notifier only closes
        clients it created itself.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigurationError("MessageBird api_key must not be empty")
        self._headers = {
            "Authorization": f"AccessKey {api_key}",
            "Accept": "application/json",
        }
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)
        self._base_url = base_url.rstrip("/")

    def send(self, message: OutgoingAlert) -> DeliveryResult:
        """POST ``message`` and translate the response into a result."""
        try:
            response = self._client.post(
                f"{self._base_url}{MESSAGES_PATH}",
                json=message.to_payload(),
                headers=self._headers,
            )
        except httpx.TimeoutException as exc:
            return DeliveryResult.failure(type(exc).__name__, str(exc) or "request timed out")
        except httpx.HTTPError as exc:
            return DeliveryResult.failure(type(exc).__name__, str(exc) or "request failed")

        if response.is_success:
            body = _json_or_empty(response)
            reference = body.get("id") if isinstance(body, dict) else None
            LOGGER.debug("MessageBird accepted message %s", reference)
            return DeliveryResult.success(reference=str(reference) if reference is not None else None)
        return DeliveryResult.failure("HTTPStatusError", _describe_error(response))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def _describe_error(response: httpx.Response) -> str:
    """Prefer the provider's error descriptions over the bare status line.

    Examples
    --------
    >>> request = httpx.Request("POST", "https://rest.messagebird.com/messages")
    >>> response = httpx.Response(401, json={"errors": [{"code": 2, "description": "incorrect access_key"}]}, request=request)
    >>> _describe_error(response)
    '401 Unauthorized: incorrect access_key'
    """

    status = f"{response.status_code} {response.reason_phrase}".strip()
    body = _json_or_empty(response)
    errors = body.get("errors") if isinstance(body, dict) else None
    if isinstance(errors, list):
        descriptions = [str(item.get("description")) for item in errors if isinstance(item, dict) and item.get("description")]
        if descriptions:
            return f"{status}: {'; '.join(descriptions)}"
    return status


__all__ = ["DEFAULT_BASE_URL", "MessageBirdNotifier"]
