"""Erros do handler. Todos são terminais para a invocação."""


class HandlerError(Exception):
    """Base para qualquer falha que deve encerrar o processo com erro."""


class ConfigurationError(HandlerError):
    """Configuração obrigatória ausente (ex.: webhook vazio)."""


class InputError(HandlerError):
    """Falha de leitura ou de decodificação do evento no stdin."""


class ValidationError(HandlerError):
    """Entity ou check do evento não passou na validação estrutural."""


class DeliveryError(HandlerError):
    """Falha ao enviar a mensagem para o webhook."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
