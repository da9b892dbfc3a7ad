import os

from . import _optional_int

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SEED_FILE = os.getenv("SEED_FILE", "")

HANDOVER_WARNING_MINUTES = int(os.getenv("HANDOVER_WARNING_MINUTES", "30"))
FAIL_OPEN_MISSING_SHIFT = bool(int(os.getenv("FAIL_OPEN_MISSING_SHIFT", "1")))
DEFAULT_TZ_OFFSET_MINUTES = _optional_int(os.getenv("DEFAULT_TZ_OFFSET_MINUTES"))
