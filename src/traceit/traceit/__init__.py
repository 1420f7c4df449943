"""traceIt attendance engine.

This package is organized by feature modules (timetable, settings, attendance)
with a thin Flask controller layer on top of plain service objects.
"""
