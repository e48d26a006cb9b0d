"""Configuration constants and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The lyrics API location and timeouts differ
between deployments (self-hosted mirrors, slow networks) and must not be
buried in the client.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from environment variables with defaults.

RULES:
- LYRICS_API_BASE_URL defaults to the public BetterLyrics API
- Timeouts are float seconds; invalid values raise ValueError on import
- DEFAULT_OUTPUT_FORMAT must be a key of formatters.FORMATTERS
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _float_env(name: str, default: float) -> float:
    """Read a positive float from the environment.

    RULES:
    - Missing or empty → default
    - Non-numeric or <= 0 → ValueError naming the variable
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError("{} must be a number of seconds, got {!r}".format(name, raw)) from None
    if value <= 0:
        raise ValueError("{} must be positive, got {!r}".format(name, raw))
    return value


# ---------------------------------------------------------------------------
# Lyrics API
# ---------------------------------------------------------------------------

LYRICS_API_BASE_URL = os.getenv("LYRICS_API_BASE_URL", "https://lyrics-api.boidu.dev")
LYRICS_API_TIMEOUT_S = _float_env("LYRICS_API_TIMEOUT_S", 15.0)
LYRICS_API_CONNECT_TIMEOUT_S = _float_env("LYRICS_API_CONNECT_TIMEOUT_S", 10.0)

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

DEFAULT_OUTPUT_FORMAT = os.getenv("DEFAULT_OUTPUT_FORMAT", "lrc")
