# config.py

import os
import secrets


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


class Config:
    """App configuration read from the environment at import time.

    Attributes
    ----------
    host, port:
        Where the Flask development server listens (``VISUALIZER_HOST``,
        ``PORT``).
    secret_key:
        Signs the session cookie that carries playback state. A random key
        is generated when ``SECRET_KEY`` is unset, so sessions do not
        survive a restart.
    log_level:
        Root logging level name (``LOG_LEVEL``), e.g. ``"DEBUG"``.
    default_algorithm:
        Algorithm id shown when the page is opened without ``?algo=``.
    default_speed_tier:
        Playback speed tier (1 slow, 2 medium, 3 fast) for new sessions.
    """

    host = os.environ.get("VISUALIZER_HOST", "127.0.0.1")
    port = _int_env("PORT", 5000)
    secret_key = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    default_algorithm = os.environ.get("VISUALIZER_DEFAULT_ALGORITHM", "bubble-sort")
    default_speed_tier = _int_env("VISUALIZER_SPEED_TIER", 2)

    # default input per category when the page is opened
    default_inputs = {
        "sorting":   "[64, 34, 25, 12, 22, 11, 90]",
        "searching": "23",
    }
