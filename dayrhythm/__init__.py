"""DayRhythm AI Backend - insights, schedule parsing and event sync."""

__version__ = "1.0.0"
