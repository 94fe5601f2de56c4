# settings.py — Settings read from environment variables

import os

LOG_LEVEL: str = os.environ.get("REALMS_LOG_LEVEL", "WARNING").upper()
DEBUG_VICTORY_POINTS: bool = os.environ.get("REALMS_DEBUG_VICTORY_POINTS", "") in ("1", "true", "yes")
