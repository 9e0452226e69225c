import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

from .errors import InputError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"

_NAME_RE = re.compile(r"[\w.\-]+", re.ASCII)


@dataclass(frozen=True)
class Entity:
    name: str
    entity_class: str = ""
    namespace: str = DEFAULT_NAMESPACE


@dataclass(frozen=True)
class Check:
    name: str
    status: int = 0
    output: str = ""
    namespace: str = DEFAULT_NAMESPACE
    interval: int = 0


@dataclass(frozen=True)
class Event:
    entity: Optional[Entity]
    check: Optional[Check]

    def uri_path(self) -> str:
        """Caminho relativo do evento no dashboard: /<namespace>/events/<entity>/<check>."""
        if self.entity is None or self.check is None:
            return ""
        parts = [self.entity.namespace, "events", self.entity.name, self.check.name]
        return "/" + "/".join(quote(p, safe="") for p in parts)


def _metadata_field(block: Dict[str, Any], field: str, default: str = "") -> str:
    # Sensu Go >= 5 usa metadata.{name,namespace}; versões antigas usam campos no topo
    metadata = block.get("metadata")
    value = None
    if isinstance(metadata, dict):
        value = metadata.get(field)
    if value is None:
        value = block.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string")
    return value


def _int_field(block: Dict[str, Any], field: str) -> int:
    value = block.get(field, 0)
    if value is None:
        return 0
    # bool é subclasse de int, mas não é um status válido
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an integer")
    return value


def _str_field(block: Dict[str, Any], field: str) -> str:
    value = block.get(field, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string")
    return value


def _parse_entity(block: Dict[str, Any]) -> Entity:
    return Entity(
        name=_metadata_field(block, "name"),
        entity_class=_str_field(block, "entity_class"),
        namespace=_metadata_field(block, "namespace", DEFAULT_NAMESPACE) or DEFAULT_NAMESPACE,
    )


def _parse_check(block: Dict[str, Any]) -> Check:
    return Check(
        name=_metadata_field(block, "name"),
        status=_int_field(block, "status"),
        output=_str_field(block, "output"),
        namespace=_metadata_field(block, "namespace", DEFAULT_NAMESPACE) or DEFAULT_NAMESPACE,
        interval=_int_field(block, "interval"),
    )


def decode_event(raw) -> Event:
    """
    Decodifica o JSON do evento. Qualquer falha (JSON inválido, documento que
    não é objeto, blocos com tipos errados) vira InputError contendo o payload
    original para diagnóstico.
    """
    if isinstance(raw, bytes):
        text = raw.decode("utf-8", errors="replace")
    else:
        text = raw

    try:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError("event must be a JSON object")

        entity_block = data.get("entity")
        check_block = data.get("check")
        for key, block in (("entity", entity_block), ("check", check_block)):
            if block is not None and not isinstance(block, dict):
                raise TypeError(f"{key} must be a JSON object")

        entity = _parse_entity(entity_block) if entity_block is not None else None
        check = _parse_check(check_block) if check_block is not None else None
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug(f"Falha ao decodificar evento: {exc}")
        raise InputError(f"failed to unmarshal stdin data: {text}") from exc

    return Event(entity=entity, check=check)


def read_event(stream) -> Event:
    """Lê o stream inteiro (sem limite de tamanho) e decodifica o evento."""
    try:
        raw = stream.read()
    except (OSError, ValueError) as exc:
        raise InputError(f"failed to read stdin: {exc}") from exc
    logger.debug(f"Evento recebido ({len(raw)} bytes)")
    return decode_event(raw)


def validate_name(name: str) -> None:
    if not name:
        raise ValidationError("name cannot be empty")
    if not _NAME_RE.fullmatch(name):
        raise ValidationError(f"name '{name}' must only contain letters, digits, '_', '.' and '-'")


def validate_entity(entity: Optional[Entity]) -> None:
    if entity is None:
        raise ValidationError("event must contain an entity")
    try:
        validate_name(entity.name)
    except ValidationError as exc:
        raise ValidationError(f"entity {exc}") from None
    try:
        validate_name(entity.namespace)
    except ValidationError as exc:
        raise ValidationError(f"entity namespace {exc}") from None
    if not entity.entity_class:
        raise ValidationError("entity class must be set")


def validate_check(check: Optional[Check]) -> None:
    if check is None:
        raise ValidationError("event must contain a check")
    try:
        validate_name(check.name)
    except ValidationError as exc:
        raise ValidationError(f"check {exc}") from None
    try:
        validate_name(check.namespace)
    except ValidationError as exc:
        raise ValidationError(f"check namespace {exc}") from None
    if check.interval < 0:
        raise ValidationError("check interval must be greater than or equal to 0")
