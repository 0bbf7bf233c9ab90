"""Sign an event and post it to the ZenCrepes webhook."""

import hashlib
import hmac
import logging

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

from jahia.zencrepes_reporter.errors import DeliveryError
from jahia.zencrepes_reporter.models.event import Event

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-hub-signature"


class DeliveryOutcome(BaseModel):
    """Result of the single POST to the webhook."""

    model_config = ConfigDict(frozen=True)

    status: int = Field(..., description="HTTP status returned by the webhook")
    signature: str = Field(..., description="Value of the signature header")


def serialize_event(event: Event) -> bytes:
    """Return the bytes that are both signed and sent."""
    return event.to_json().encode("utf-8")


def sign_payload(body: bytes, secret: str) -> str:
    """Compute the ``sha1=<hex>`` HMAC signature of body."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha1).hexdigest()
    return f"sha1={digest}"


async def post_payload(body: bytes, secret: str, payload_url: str) -> DeliveryOutcome:
    """Post already serialized bytes along with their signature.

    The response status is recorded but not checked.

    Raises:
        DeliveryError: If the request fails at the transport level

    """
    signature = sign_payload(body, secret)
    headers = {
        SIGNATURE_HEADER: signature,
        "Content-Type": "application/json",
    }

    logger.info(f"Posting event to {payload_url}")
    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                payload_url, data=body, headers=headers
            ) as response:
                status = response.status
    except (aiohttp.ClientError, TimeoutError) as e:
        raise DeliveryError(f"Failed to post event to {payload_url}: {e}", e) from e

    if status >= 400:
        logger.warning(f"Webhook answered with status {status}")
    else:
        logger.info(f"Webhook answered with status {status}")

    return DeliveryOutcome(status=status, signature=signature)


async def send_event(event: Event, secret: str, payload_url: str) -> DeliveryOutcome:
    """Serialize, sign and post an event.

    Args:
        event: Event to deliver
        secret: Webhook secret used as HMAC key
        payload_url: Webhook payload URL

    Returns:
        Outcome of the delivery

    Raises:
        DeliveryError: If the request fails at the transport level

    """
    return await post_payload(serialize_event(event), secret, payload_url)
