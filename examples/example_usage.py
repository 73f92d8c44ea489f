"""Example: use the service layer directly (no Flask).

Prints today's dashboard and this week's absence report for section M.
"""

from dataclasses import replace
from datetime import timedelta

from dotenv import load_dotenv

from config import load_settings

from src.gate_attendance.gate_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(settings)

    for section, stats in container.dashboard_service.today_stats().items():
        print(section, stats.to_dict())

    today_query = container.report_service.build_query(report_type="absent", section="M")
    week_query = replace(today_query, start=today_query.end - timedelta(days=6))
    for row in container.report_service.build_report(week_query):
        print(row.to_dict())


if __name__ == "__main__":
    main()
