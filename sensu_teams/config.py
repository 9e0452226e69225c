import math
from dataclasses import dataclass

from .constants import (
    DEFAULT_ACTION_NAME,
    DEFAULT_CHANNEL,
    DEFAULT_ICON_URL,
    MS_TEAMS_TIMEOUT_SECONDS,
    MS_TEAMS_WEBHOOK_URL,
    SENSU_DASHBOARD_URL,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class HandlerConfig:
    """
    Configuração do processo, montada uma única vez no startup e passada
    por parâmetro para o formatter e o sender.
    """
    webhook_url: str = MS_TEAMS_WEBHOOK_URL
    channel: str = DEFAULT_CHANNEL
    # Aceito por compatibilidade, mas ainda não aplicado em nenhum campo
    message_prefix: str = ""
    bot_name: str = ""
    icon_url: str = DEFAULT_ICON_URL
    action_name: str = DEFAULT_ACTION_NAME
    dashboard_url: str = SENSU_DASHBOARD_URL
    timeout: float = MS_TEAMS_TIMEOUT_SECONDS


def validate_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"timeout must be a number, got {value!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"timeout must be a positive number of seconds, got {value!r}")
    return timeout


def config_from_args(args) -> HandlerConfig:
    return HandlerConfig(
        webhook_url=(args.webhook_url or "").strip(),
        channel=args.channel or "",
        message_prefix=args.message_prefix or "",
        bot_name=args.bot_name or "",
        icon_url=args.icon_url or "",
        action_name=args.action_name or DEFAULT_ACTION_NAME,
        dashboard_url=(args.dashboard or "").strip(),
        timeout=validate_timeout(args.timeout),
    )
