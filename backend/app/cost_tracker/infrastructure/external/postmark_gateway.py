"""Postmark email gateway for cost-alert notifications.

Sends transactional email through the Postmark HTTP API. When no API
token is configured the LoggingNotificationGateway is used instead and
messages only go to the application log.
"""

import logging
from typing import Optional

import httpx

from app.cost_tracker.application.exceptions import NotificationDeliveryError
from app.cost_tracker.application.interfaces.notification_gateway import (
    CostAlertMessage,
    NotificationGateway,
)
from app.cost_tracker.domain.value_objects.email_address import EmailAddress

logger = logging.getLogger(__name__)

POSTMARK_API_URL = "https://api.postmarkapp.com/email"


class PostmarkNotificationGateway(NotificationGateway):
    """NotificationGateway backed by the Postmark email API."""

    def __init__(
        self,
        api_token: str,
        from_email: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            api_token: Postmark server token.
            from_email: Sender address.
            timeout: HTTP timeout in seconds.
            client: Optional pre-built client (tests inject a MockTransport).
        """
        self._api_token = api_token
        self._from_email = from_email
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def send_cost_alert(
        self, destination: EmailAddress, message: CostAlertMessage
    ) -> None:
        """Send a cost-alert email.

        Raises:
            NotificationDeliveryError: If Postmark rejects the message or
                the request fails.
        """
        client = await self._get_client()
        try:
            response = await client.post(
                POSTMARK_API_URL,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                    "X-Postmark-Server-Token": self._api_token,
                },
                json={
                    "From": self._from_email,
                    "To": str(destination),
                    "Subject": message.subject,
                    "HtmlBody": message.html_body,
                    "TextBody": message.text_body,
                    "MessageStream": "outbound",
                },
            )
        except httpx.HTTPError as e:
            raise NotificationDeliveryError(str(destination), f"HTTP error: {e}") from e

        if response.status_code != 200:
            logger.error(f"Postmark error: {response.status_code} - {response.text}")
            raise NotificationDeliveryError(
                str(destination),
                f"Postmark returned {response.status_code}",
            )

        logger.info(f"Cost alert email sent to {destination} for {message.service_name}")

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class LoggingNotificationGateway(NotificationGateway):
    """Development gateway that logs messages instead of sending them."""

    async def send_cost_alert(
        self, destination: EmailAddress, message: CostAlertMessage
    ) -> None:
        logger.info(
            f"[DEV MODE] Cost alert email to {destination}:\n"
            f"  Subject: {message.subject}\n"
            f"  Service: {message.service_name}\n"
            f"  Current Cost: ${message.amount:,.2f}\n"
            f"  Threshold: ${message.threshold:,.2f}"
        )
