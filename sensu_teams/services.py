import logging

import requests

from .errors import DeliveryError

logger = logging.getLogger(__name__)


def send_teams_payload(webhook_url, payload, timeout=10.0):
    """
    Faz um único POST JSON para o webhook do Teams. Sem retry.

    Respostas fora de 2xx são tratadas como falha de entrega.
    """
    try:
        resp = requests.post(
            webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except (requests.RequestException, ValueError) as exc:
        raise DeliveryError(f"failed to send message to webhook: {exc}") from exc

    try:
        logger.debug(f"Teams response: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            body = (resp.text or "")[:200]
            raise DeliveryError(
                f"webhook returned HTTP {resp.status_code}: {body}",
                status_code=resp.status_code,
            )
    finally:
        resp.close()
    return resp
