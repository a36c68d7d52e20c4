"""Pytest configuration and shared fixtures."""
import logging

import pytest

from meetbuddy.domain.date_time import DateTime
from meetbuddy.domain.meeting import Meeting
from meetbuddy.domain.unique_meeting_list import UniqueMeetingList
from meetbuddy.domain.values import Description, Name, Priority, Tag


class MeetingBuilder:
    """Builds meetings for tests, starting from defaults or an existing meeting."""

    DEFAULT_NAME = "Team Sync"
    DEFAULT_START = "2021-11-01 09:00"
    DEFAULT_TERMINATE = "2021-11-01 10:00"
    DEFAULT_PRIORITY = "3"
    DEFAULT_DESCRIPTION = "Weekly status update"

    def __init__(self, meeting=None):
        if meeting is None:
            self.name = Name(self.DEFAULT_NAME)
            self.start = DateTime(self.DEFAULT_START)
            self.terminate = DateTime(self.DEFAULT_TERMINATE)
            self.priority = Priority(self.DEFAULT_PRIORITY)
            self.description = Description(self.DEFAULT_DESCRIPTION)
            self.tags = set()
        else:
            self.name = meeting.name
            self.start = meeting.start
            self.terminate = meeting.terminate
            self.priority = meeting.priority
            self.description = meeting.description
            self.tags = set(meeting.tags)

    def with_name(self, name):
        self.name = Name(name)
        return self

    def with_start(self, start):
        self.start = DateTime(start)
        return self

    def with_terminate(self, terminate):
        self.terminate = DateTime(terminate)
        return self

    def with_priority(self, priority):
        self.priority = Priority(priority)
        return self

    def with_description(self, description):
        self.description = Description(description)
        return self

    def with_tags(self, *tags):
        self.tags = {Tag(tag) for tag in tags}
        return self

    def build(self):
        return Meeting(self.name, self.start, self.terminate, self.priority, self.description, self.tags)


@pytest.fixture
def builder():
    """The meeting builder class."""
    return MeetingBuilder


@pytest.fixture
def meeting1():
    """Typical meeting with one tag."""
    return (
        MeetingBuilder()
        .with_name("CS2103 Meeting")
        .with_start("2021-11-02 10:00")
        .with_terminate("2021-11-02 12:00")
        .with_priority("3")
        .with_description("Discuss milestone")
        .with_tags("friends")
        .build()
    )


@pytest.fixture
def meeting2():
    """Typical meeting without tags, later than meeting1."""
    return (
        MeetingBuilder()
        .with_name("Project Review")
        .with_start("2021-11-03 14:00")
        .with_terminate("2021-11-03 15:30")
        .with_priority("2")
        .with_description("Review the demo")
        .build()
    )


@pytest.fixture
def meeting3():
    """Typical meeting earlier than meeting1 and meeting2."""
    return (
        MeetingBuilder()
        .with_name("Breakfast")
        .with_start("2021-10-30 08:00")
        .with_terminate("2021-10-30 08:45")
        .with_priority("1")
        .with_description("Catch up")
        .with_tags("family", "food")
        .build()
    )


@pytest.fixture
def unique_meeting_list():
    """Empty meeting list."""
    return UniqueMeetingList()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after tests that reconfigure logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
