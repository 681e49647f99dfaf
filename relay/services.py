from typing import Iterable, Optional

import requests

from .constants import DEBUG_MODE, DISCORD_TIMEOUT_SECONDS, get_webhook_url
from .embeds import DiscordContent
from .exceptions import DeliveryError


def send_discord_payload(envelope: DiscordContent, webhook_url: Optional[str] = None, timeout: float = DISCORD_TIMEOUT_SECONDS):
    url = webhook_url or get_webhook_url()
    try:
        resp = requests.post(url, json=envelope.to_payload(), timeout=timeout)
    except requests.RequestException as exc:
        raise DeliveryError(f"POST to discord failed: {exc}") from exc

    if DEBUG_MODE:
        print(f"[DEBUG] Discord response: {resp.status_code}")
        if resp.status_code != 204:
            print(f"[DEBUG] Response content: {resp.text}")

    if not 200 <= resp.status_code < 300:
        raise DeliveryError(
            f"discord responded {resp.status_code}: {resp.text[:200]}",
            status_code=resp.status_code,
        )
    return resp


def deliver_all(envelopes: Iterable[DiscordContent], webhook_url: Optional[str] = None) -> int:
    """Envia os envelopes em ordem, um POST por envelope.

    Para no primeiro erro; o DeliveryError sai com ``delivered`` indicando
    quantos já tinham sido aceitos pelo Discord. Retorna o total enviado.
    """
    delivered = 0
    for envelope in envelopes:
        try:
            send_discord_payload(envelope, webhook_url)
        except DeliveryError as exc:
            exc.delivered = delivered
            raise
        delivered += 1
    return delivered
