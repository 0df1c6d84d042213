"""Domain entity — an uploaded plain-text meeting note."""

from dataclasses import dataclass


@dataclass
class MeetingNote:
    """Raw meeting minutes attached to a project, optionally to one activity."""

    id: str
    project_id: str = ""
    client_id: str = ""
    file_name: str = ""
    content: str = ""
    uploaded_at: str = ""
    activity_id: str | None = None
