"""Application configuration — environment variables and derived constants.

Loads ``BOT_TOKEN``, the Bot API endpoint, the HTTP timeout and the client
defaults from the environment via ``python-dotenv``.  All values are
resolved at import time so other modules can ``from config import …``
without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import TgboundLogger

# ── tgbound ──────────────────────────────────────────────────────────────────
from tgbound.defaults import ClientDefaults, ParseMode

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

logger = TgboundLogger.get_logger()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_bool(name: str, raw: str | None) -> bool | None:
    """Interpret *raw* as a boolean flag; unset or unrecognised gives ``None``."""
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean setting", extra={"setting": name, "value": raw})
    return None


def _parse_parse_mode(raw: str | None) -> ParseMode | None:
    """Match *raw* against the known parse modes, case-insensitively."""
    if raw is None or not raw.strip():
        return None
    for mode in ParseMode:
        if mode.value.lower() == raw.strip().lower():
            return mode
    logger.warning("Ignoring invalid parse mode", extra={"setting": "DEFAULT_PARSE_MODE", "value": raw})
    return None


def _parse_timeout(raw: str | None, fallback: int) -> int:
    if not raw:
        return fallback
    try:
        timeout = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid request timeout", extra={"value": raw})
        return fallback
    if timeout <= 0:
        logger.warning("Ignoring non-positive request timeout", extra={"value": raw})
        return fallback
    return timeout


def _load_client_defaults() -> ClientDefaults:
    return ClientDefaults(
        parse_mode=_parse_parse_mode(os.environ.get("DEFAULT_PARSE_MODE")),
        disable_web_page_preview=_parse_bool(
            "DISABLE_WEB_PAGE_PREVIEW", os.environ.get("DISABLE_WEB_PAGE_PREVIEW")
        ),
        disable_notification=_parse_bool("DISABLE_NOTIFICATION", os.environ.get("DISABLE_NOTIFICATION")),
        protect_content=_parse_bool("PROTECT_CONTENT", os.environ.get("PROTECT_CONTENT")),
        allow_sending_without_reply=_parse_bool(
            "ALLOW_SENDING_WITHOUT_REPLY", os.environ.get("ALLOW_SENDING_WITHOUT_REPLY")
        ),
    )


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_URL: str = (os.environ.get("API_URL") or "https://api.telegram.org").rstrip("/")
BASE_URL: str = f"{API_URL}/bot{BOT_TOKEN or ''}"
REQUEST_TIMEOUT: int = _parse_timeout(os.environ.get("REQUEST_TIMEOUT"), 10)
CLIENT_DEFAULTS: ClientDefaults = _load_client_defaults()


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded — BOT_TOKEN is set, BASE_URL ready", extra={"api_url": API_URL})
else:
    logger.warning("Config loaded — BOT_TOKEN is NOT set")

logger.info(
    "Client defaults loaded",
    extra={"client_defaults": CLIENT_DEFAULTS.model_dump(mode="json", exclude_none=True)},
)
