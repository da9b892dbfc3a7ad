SECRET_KEY = "test-secret"

DEBUG = False
LOG_LEVEL = "WARNING"

SEED_FILE = ""

HANDOVER_WARNING_MINUTES = 30
FAIL_OPEN_MISSING_SHIFT = True
DEFAULT_TZ_OFFSET_MINUTES = None
