"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_SECTION = "M"
ALL_SECTIONS = "all"

# Section -> "HH:MM" lateness cutoff for check-ins.
DEFAULT_SECTION_THRESHOLDS = {
    "M": "07:30",
    "F": "08:00",
}

DEFAULT_TIMEZONE = "Asia/Dubai"

NO_DATA = "-"
DATE_RANGE_SEPARATOR = "–"
DISPLAY_DATE_FORMAT = "%d/%m"
ISO_DATE_FORMAT = "%Y-%m-%d"
CLOCK_TIME_FORMAT = "%H:%M:%S"

LATE_NOTE = "\U0001F553 late"
PERMIT_NOTE = "\U0001F4CB official permit"
EARLY_DEPARTURE_NOTE = "⏰ left before time"

# Substrings that mark a check-in note as late, including the labels written
# by the first (Arabic) deployment of the gate.
LATE_MARKERS = ("\U0001F553", "تأخر", "تاخر")

# Legacy status labels still present in older attendance sheets.
LEGACY_STATUS_LABELS = {
    "دخول": "check-in",
    "خروج": "check-out",
    "استئذان": "permit",
    "خروج مبكر": "early-departure",
}

ROSTER_RANGE = "staff_list!A2:E"
EVENT_LOG_RANGE = "attendance_log!A2:G"
EVENT_LOG_APPEND_RANGE = "attendance_log!A:G"

# Longest report window; wider requests keep the most recent days.
MAX_REPORT_DAYS = 366
