import logging

from .config import HandlerConfig
from .errors import ConfigurationError
from .events import read_event, validate_check, validate_entity
from .formatters import build_message
from .services import send_teams_payload

logger = logging.getLogger(__name__)


def handle_event(config: HandlerConfig, stream, sender=send_teams_payload):
    """
    Pipeline completo de uma invocação: ler -> validar -> formatar -> enviar.

    Qualquer erro é propagado como HandlerError; o webhook só é chamado se
    todas as etapas anteriores passarem.
    """
    if not config.webhook_url:
        raise ConfigurationError("webhook url is empty")

    event = read_event(stream)
    validate_entity(event.entity)
    validate_check(event.check)

    message = build_message(event, config)
    sender(config.webhook_url, message.to_payload(), config.timeout)
    logger.info(
        f"Notificação enviada: entity={event.entity.name} check={event.check.name} "
        f"status={message.text}"
    )
    return message
