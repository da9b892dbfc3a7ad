import os

from . import _optional_int

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# JSON file with {"workers": [...], "shift_schedules": [...]} rows loaded at startup
SEED_FILE = os.getenv("SEED_FILE", "")

HANDOVER_WARNING_MINUTES = int(os.getenv("HANDOVER_WARNING_MINUTES", "30"))
# Report workers without a configured shift as AVAILABLE (1) or OFF_DUTY (0)
FAIL_OPEN_MISSING_SHIFT = bool(int(os.getenv("FAIL_OPEN_MISSING_SHIFT", "1")))
# Minutes behind UTC (browser getTimezoneOffset); empty = server local clock
DEFAULT_TZ_OFFSET_MINUTES = _optional_int(os.getenv("DEFAULT_TZ_OFFSET_MINUTES"))
