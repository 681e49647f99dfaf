"""Erros do relay.

Todos resultam em HTTP 400 para quem chamou, mas mantêm o tipo (``kind``)
distinto para os logs.
"""


class RelayError(Exception):
    """Base para os erros do relay"""

    kind = "relay"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or "relay operation failed"
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class PayloadValidationError(RelayError):
    """Corpo da requisição não é JSON ou não segue o schema do Alertmanager"""

    kind = "validation"


class ConfigurationError(RelayError):
    """Configuração obrigatória ausente (ex.: DISCORD_WEBHOOK_URL)"""

    kind = "configuration"


class DeliveryError(RelayError):
    """Falha ao enviar o payload ao Discord (rede ou status não-2xx)"""

    kind = "transport"

    def __init__(self, message: str | None = None, status_code: int | None = None, delivered: int = 0) -> None:
        self.status_code = status_code
        # quantos envelopes já tinham sido entregues antes da falha
        self.delivered = delivered
        super().__init__(message or "discord delivery failed")
