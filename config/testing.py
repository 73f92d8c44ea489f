from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

STORE_BACKEND = "sheets"
SPREADSHEET_ID = ""
GOOGLE_SERVICE_ACCOUNT = ""
AUTO_INIT_DB = False

TIMEZONE = "Asia/Dubai"
SECTION_THRESHOLDS = {"M": "07:30", "F": "08:00"}
SCAN_POLICY = "explicit"

LOG_LEVEL = "WARNING"
LOG_FILE = None
