import os

from .exceptions import ConfigurationError

# Configurações globais de ambiente
APP_PORT = int(os.getenv("APP_PORT", "9094"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Timeout fixo para o POST no Discord (segundos)
DISCORD_TIMEOUT_SECONDS = float(os.getenv("DISCORD_TIMEOUT_SECONDS", "10"))

SERVICE_NAME = "alertmanager-discord-relay"

# Paleta de cores dos embeds
COLOR_RED = 0x992D22
COLOR_GREEN = 0x2ECC71
COLOR_GREY = 0x95A5A6

# Valores padrão quando o payload não traz o dado
DEFAULT_GROUP_NAME = "unnamed"
DEFAULT_GROUP_SUMMARY = "no summary"
DEFAULT_LABEL_VALUE = "unknown"
DEFAULT_SEVERITY = "INFO"
EMPTY_PLACEHOLDER = "-"

# Instâncias que são substituídas por exported_instance quando existir
PLACEHOLDER_INSTANCES = {"unknown", "localhost"}


def get_webhook_url() -> str:
    """Lê DISCORD_WEBHOOK_URL a cada chamada (permite reconfigurar sem restart)."""
    url = (os.getenv("DISCORD_WEBHOOK_URL") or "").strip()
    if not url:
        raise ConfigurationError("DISCORD_WEBHOOK_URL is not set")
    return url
