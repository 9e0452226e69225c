import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Tuple
from urllib.parse import urljoin, urlsplit

from .config import HandlerConfig
from .constants import STATUS_LEVELS, UNKNOWN_STATUS
from .events import Event

logger = logging.getLogger(__name__)

_INVALID_URI_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")
# O dashboard do Sensu é sempre servido por HTTP(S)
DASHBOARD_SCHEMES = ("http", "https")


def status_color(status: int) -> str:
    return STATUS_LEVELS.get(status, UNKNOWN_STATUS)["color"]


def status_label(status: int) -> str:
    return STATUS_LEVELS.get(status, UNKNOWN_STATUS)["label"]


class LinkResolution(NamedTuple):
    uri: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_uri_reference(value, absolute: bool):
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    if _INVALID_URI_CHARS.search(value):
        raise ValueError(f"invalid character in {value!r}")
    parts = urlsplit(value)
    # .port valida a porta e levanta ValueError se estiver fora do intervalo
    parts.port
    if absolute and not (parts.scheme and parts.netloc):
        raise ValueError(f"{value!r} is not an absolute URL")
    if absolute and parts.scheme.lower() not in DASHBOARD_SCHEMES:
        raise ValueError(f"unsupported scheme {parts.scheme!r} in {value!r}")
    return parts


def resolve_link(dashboard_url: str, event_path: str) -> LinkResolution:
    """
    Resolve o caminho do evento contra a URL base do dashboard (RFC 3986:
    mantém scheme/host da base e substitui o path).

    Nunca levanta exceção: se alguma das duas URLs for inválida, devolve
    uri vazia junto com o motivo. Um link ruim não pode bloquear o envio.
    """
    try:
        _parse_uri_reference(dashboard_url, absolute=True)
    except ValueError as exc:
        return LinkResolution("", f"invalid dashboard url: {exc}")
    try:
        _parse_uri_reference(event_path, absolute=False)
    except ValueError as exc:
        return LinkResolution("", f"invalid event path: {exc}")
    return LinkResolution(urljoin(dashboard_url, event_path))


def resolve_link_uri(dashboard_url: str, event_path: str) -> str:
    return resolve_link(dashboard_url, event_path).uri


@dataclass(frozen=True)
class Section:
    text: str
    activity_image: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {"activityImage": self.activity_image, "text": self.text}


@dataclass(frozen=True)
class Target:
    uri: str
    os: str = "default"

    def to_payload(self) -> Dict[str, Any]:
        return {"os": self.os, "uri": self.uri}


@dataclass(frozen=True)
class PotentialAction:
    name: str
    targets: Tuple[Target, ...]
    type: str = "OpenUri"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "@type": self.type,
            "name": self.name,
            "targets": [t.to_payload() for t in self.targets],
        }


@dataclass(frozen=True)
class OutboundMessage:
    theme_color: str
    text: str
    channel: str = ""
    username: str = ""
    sections: Tuple[Section, ...] = field(default_factory=tuple)
    potential_action: Tuple[PotentialAction, ...] = field(default_factory=tuple)

    def to_payload(self) -> Dict[str, Any]:
        """Formato JSON esperado pelo webhook do Teams."""
        return {
            "themeColor": self.theme_color,
            "text": self.text,
            "channel": self.channel,
            "username": self.username,
            "section": [s.to_payload() for s in self.sections],
            "PotentialAction": [a.to_payload() for a in self.potential_action],
        }


def build_message(event: Event, config: HandlerConfig) -> OutboundMessage:
    """Monta o cartão do Teams a partir de um evento já validado."""
    status = event.check.status
    link = resolve_link(config.dashboard_url, event.uri_path())
    if not link.ok:
        if config.dashboard_url:
            logger.warning(f"Link do dashboard não resolvido, enviando sem link: {link.error}")
        else:
            logger.debug("Nenhum dashboard configurado, enviando sem link")

    action = PotentialAction(name=config.action_name, targets=(Target(uri=link.uri),))
    message = OutboundMessage(
        theme_color=status_color(status),
        text=status_label(status),
        channel=config.channel,
        username=config.bot_name,
        sections=(Section(text=event.check.output, activity_image=config.icon_url),),
        potential_action=(action,),
    )
    logger.debug(
        f"Mensagem montada: entity={event.entity.name} check={event.check.name} "
        f"status={status} label={message.text}"
    )
    return message
