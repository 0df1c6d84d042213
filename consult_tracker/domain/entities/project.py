"""Domain entity for projects — sales opportunities and engagements per client."""

from dataclasses import dataclass
from enum import Enum


class ProjectStatus(str, Enum):
    """Pipeline stage of a project."""

    PROSPECT = "prospect"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    WON = "won"
    LOST = "lost"
    DEEPENING = "deepening"


PROJECT_STATUS_LABELS: dict[ProjectStatus, str] = {
    ProjectStatus.PROSPECT: "Prospect",
    ProjectStatus.PROPOSAL: "Proposal",
    ProjectStatus.NEGOTIATION: "Negotiation",
    ProjectStatus.WON: "Won",
    ProjectStatus.LOST: "Lost",
    ProjectStatus.DEEPENING: "Deepening",
}

# Stages that still count towards the open pipeline.
OPEN_STATUSES = frozenset({
    ProjectStatus.PROSPECT,
    ProjectStatus.PROPOSAL,
    ProjectStatus.NEGOTIATION,
    ProjectStatus.DEEPENING,
})


@dataclass
class Project:
    """An engagement or opportunity with a client.

    ``client_id`` references ``Client.id`` but is not enforced.
    ``amount`` is a whole currency amount (no minor units).
    """

    id: str
    client_id: str = ""
    title: str = ""
    description: str = ""
    status: ProjectStatus = ProjectStatus.PROSPECT
    amount: int = 0
    start_date: str = ""
    end_date: str = ""
    created_at: str = ""
    updated_at: str = ""
