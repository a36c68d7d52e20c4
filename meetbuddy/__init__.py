"""MeetBuddy meeting model - Business entities and value objects.

This package contains the meeting domain model and the collection that
owns meetings, independent of command parsing, storage and UI layers.
"""
