"""Aggregate snapshot of all four collections."""

from dataclasses import dataclass, field

from .activity import Activity
from .client import Client
from .meeting_note import MeetingNote
from .project import Project


@dataclass
class AppData:
    """All collections as loaded together.

    Each field is persisted independently as its own document.
    """

    clients: list[Client] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    meeting_notes: list[MeetingNote] = field(default_factory=list)
