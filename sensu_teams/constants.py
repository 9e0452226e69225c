import os

# Configurações globais de ambiente (apenas valores padrão, lidos uma vez)
MS_TEAMS_WEBHOOK_URL = os.getenv("MS_TEAMS_WEBHOOK_URL", "")
SENSU_DASHBOARD_URL = os.getenv("SENSU_DASHBOARD_URL", "")
DEFAULT_TIMEOUT_SECONDS = 10.0


def env_float(name, default):
    # Valor inválido no ambiente cai no padrão; a validação de faixa fica no config
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


MS_TEAMS_TIMEOUT_SECONDS = env_float("MS_TEAMS_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

DEFAULT_CHANNEL = "#general"
DEFAULT_ICON_URL = "http://s3-us-west-2.amazonaws.com/sensuapp.org/sensu.png"
DEFAULT_ACTION_NAME = "View in Sensu"

# Status de check do Sensu -> cor/label do cartão
STATUS_LEVELS = {
    0: {"label": "RESOLVED", "color": "#008000"},
    1: {"label": "WARNING", "color": "#FFA500"},
    2: {"label": "CRITICAL", "color": "#FF0000"},
}
UNKNOWN_STATUS = {"label": "UNKNOWN", "color": "#808080"}
