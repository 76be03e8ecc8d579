"""logview configuration."""
import os


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_choice(name: str, choices: set[str], default: str) -> str:
    value = (os.getenv(name) or "").strip().lower()
    return value if value in choices else default


# Decoder behavior
# "heuristic": substring match on "Error"/"error" or an explicit is_error flag.
# "flag": explicit is_error flag only.
TOOL_RESULT_ERROR_MODES = {"heuristic", "flag"}
TOOL_RESULT_ERROR_MODE = _env_choice("LOGVIEW_TOOL_RESULT_ERROR_MODE", TOOL_RESULT_ERROR_MODES, "heuristic")
MCP_NAMESPACE = os.getenv("LOGVIEW_MCP_NAMESPACE", "mcp").strip() or "mcp"

# Batch limits for the HTTP adapter
MAX_RECORDS = _env_int("LOGVIEW_MAX_RECORDS", 5000)

# Observability
OTEL_ENABLED = _env_bool("LOGVIEW_OTEL_ENABLED", False)
OTEL_ENDPOINT = os.getenv("LOGVIEW_OTEL_ENDPOINT", "http://localhost:4318")
OTEL_SERVICE_NAME = os.getenv("LOGVIEW_OTEL_SERVICE_NAME", "logview")
PROM_PORT = _env_int("LOGVIEW_PROM_PORT", 9464)

# Server settings
HOST = os.getenv("LOGVIEW_HOST", "0.0.0.0")
PORT = _env_int("LOGVIEW_PORT", 8000)

# CORS
FRONTEND_ORIGIN = os.getenv("LOGVIEW_FRONTEND_ORIGIN", "http://localhost:3000")
