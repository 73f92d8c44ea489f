"""Settings shared by every environment module.

Each environment module does ``from .config import *`` and overrides what
differs. Values are read from the process environment (``.env`` is loaded by
``create_app`` before these modules are imported).
"""

import os


def env_bool(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def parse_thresholds(raw: str) -> dict:
    """``"M=07:30,F=08:00"`` -> ``{"M": "07:30", "F": "08:00"}``."""
    thresholds = {}
    for item in raw.split(","):
        if "=" not in item:
            continue
        section, clock = item.split("=", 1)
        if section.strip() and clock.strip():
            thresholds[section.strip().upper()] = clock.strip()
    return thresholds


# Storage: "sheets" (Google Sheets) or "mysql"
STORE_BACKEND = os.getenv("STORE_BACKEND", "sheets").lower()

SPREADSHEET_ID = os.getenv("SPREADSHEET_ID", "")
# Service-account key as a JSON string
GOOGLE_SERVICE_ACCOUNT = os.getenv("GOOGLE_SERVICE_ACCOUNT", "")
ROSTER_RANGE = os.getenv("ROSTER_RANGE", "staff_list!A2:E")
EVENT_LOG_RANGE = os.getenv("EVENT_LOG_RANGE", "attendance_log!A2:G")
EVENT_LOG_APPEND_RANGE = os.getenv("EVENT_LOG_APPEND_RANGE", "attendance_log!A:G")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gate_attendance"),
}
AUTO_INIT_DB = env_bool("AUTO_INIT_DB", "0")

# Gate clock: UAE time (UTC+4) unless overridden
TIMEZONE = os.getenv("TIMEZONE", "Asia/Dubai")
SECTION_THRESHOLDS = parse_thresholds(os.getenv("SECTION_THRESHOLDS", "M=07:30,F=08:00"))
# "explicit" records the mode picked at the gate, "auto-toggle" alternates check-in/check-out
SCAN_POLICY = os.getenv("SCAN_POLICY", "explicit").lower()
# Longest date window a report may cover
MAX_REPORT_DAYS = int(os.getenv("MAX_REPORT_DAYS", "366"))

AUTH_USERS = {
    "admin": {"password": os.getenv("ADMIN_PASSWORD", "1234"), "role": "admin"},
    "hr": {"password": os.getenv("HR_PASSWORD", "1234"), "role": "hr"},
    "gate": {"password": os.getenv("GATE_PASSWORD", "1234"), "role": "gate"},
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
