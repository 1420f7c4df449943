"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the counting rules live in the services.
"""

from datetime import datetime

from src.traceit.traceit.attendance.records import build_record_map
from src.traceit.traceit.container import build_container


def main():
    container = build_container()
    timetable = container.timetable_service.build_timetable(
        {
            "name": "Semester 4",
            "startDate": "2026-01-05",
            "endDate": "2026-05-01",
            "slots": [
                {"id": "s1", "day": 0, "startTime": "09:00", "endTime": "10:00", "subject": "MC102", "subjectName": "Discrete Mathematics"},
                {"id": "s2", "day": 2, "startTime": "14:00", "endTime": "17:00", "subject": "FE208", "type": "lab", "rowSpan": 3},
            ],
        }
    )
    records = build_record_map({"2026-01-05-s1": "attended", "2026-01-07-s2": "bunk"})
    settings = container.settings_service.merge({"countMassBunkAs": "exclude"})

    report = container.attendance_service.build_report(timetable, records, settings, now=datetime(2026, 1, 16, 18, 0))
    print(report.to_dict())


if __name__ == "__main__":
    main()
