"""Demonstration dataset written by CollectionStore.seed().

Fixed ids keep the cross-references stable: projects point at clients,
activities at projects and clients, the meeting note at activity ``a1``.
"""

from consult_tracker.application.services.identity import now_timestamp
from consult_tracker.domain.entities import (
    Activity,
    ActivityType,
    AppData,
    Client,
    MeetingNote,
    Project,
    ProjectStatus,
)

_FIRST_MEETING_MINUTES = """\
Date: 2026-02-10 14:00-15:30
Place: Sample Trading head office
Attendees: Mr. Tanaka (GM), Ms. Yamada (Manager); ours: Suzuki, Sasaki

Agenda
1. Review of the current business workflow
2. Priority areas for digitalisation
3. Next steps and schedule

Discussion
- Paperless order processing is the most urgent item
- They also want better visibility into inventory
- Full kickoff requested from April"""


def get_seed_data(now: str | None = None) -> AppData:
    """Build the sample dataset, stamping every record with ``now``."""
    now = now or now_timestamp()

    clients = [
        Client(
            id="c1",
            company_name="Sample Trading Co., Ltd.",
            contact_person="Taro Tanaka",
            email="tanaka@sample.co.jp",
            phone="03-1234-5678",
            address="1-1-1 Marunouchi, Chiyoda-ku, Tokyo",
            notes="Possible annual contract",
            created_at=now,
            updated_at=now,
        ),
        Client(
            id="c2",
            company_name="Test Industries LLC",
            contact_person="Hanako Suzuki",
            email="suzuki@test-ind.co.jp",
            phone="06-9876-5432",
            address="2-2-2 Umeda, Kita-ku, Osaka",
            notes="Interested in DX initiatives",
            created_at=now,
            updated_at=now,
        ),
        Client(
            id="c3",
            company_name="Innovation Inc.",
            contact_person="Jiro Sato",
            email="sato@innovation.co.jp",
            phone="052-111-2222",
            address="3-3-3 Sakae, Naka-ku, Nagoya",
            notes="Considering support for a new business launch",
            created_at=now,
            updated_at=now,
        ),
    ]

    projects = [
        Project(
            id="p1",
            client_id="c1",
            title="DX consulting",
            description="Support for digitalising business processes",
            status=ProjectStatus.PROPOSAL,
            amount=5_000_000,
            start_date="2026-03-01",
            end_date="2026-08-31",
            created_at=now,
            updated_at=now,
        ),
        Project(
            id="p2",
            client_id="c2",
            title="Organisational reform",
            description="Review of the organisation and improvement proposals",
            status=ProjectStatus.PROSPECT,
            amount=3_000_000,
            start_date="2026-04-01",
            end_date="2026-09-30",
            created_at=now,
            updated_at=now,
        ),
        Project(
            id="p3",
            client_id="c1",
            title="IT strategy planning",
            description="Drafting a mid-term IT strategy",
            status=ProjectStatus.WON,
            amount=8_000_000,
            start_date="2026-01-01",
            end_date="2026-06-30",
            created_at=now,
            updated_at=now,
        ),
        Project(
            id="p4",
            client_id="c3",
            title="New business planning",
            description="Feasibility study for a new business",
            status=ProjectStatus.NEGOTIATION,
            amount=4_500_000,
            start_date="2026-05-01",
            end_date="2026-10-31",
            created_at=now,
            updated_at=now,
        ),
    ]

    activities = [
        Activity(
            id="a1",
            project_id="p1",
            client_id="c1",
            type=ActivityType.MEETING,
            title="Initial hearing",
            description="Walked through the current workflow and discussed where to digitalise first.",
            date="2026-02-10",
            created_at=now,
        ),
        Activity(
            id="a2",
            project_id="p3",
            client_id="c1",
            type=ActivityType.APPOINTMENT,
            title="Interim report",
            description="Presented the interim IT strategy report; direction agreed.",
            date="2026-02-05",
            created_at=now,
        ),
        Activity(
            id="a3",
            project_id="p2",
            client_id="c2",
            type=ActivityType.CALL,
            title="Follow-up call",
            description="Confirmed when the proposal will be sent.",
            date="2026-02-11",
            created_at=now,
        ),
    ]

    meeting_notes = [
        MeetingNote(
            id="mn1",
            project_id="p1",
            client_id="c1",
            activity_id="a1",
            file_name="initial-hearing-minutes.txt",
            content=_FIRST_MEETING_MINUTES,
            uploaded_at=now,
        ),
    ]

    return AppData(
        clients=clients,
        projects=projects,
        activities=activities,
        meeting_notes=meeting_notes,
    )
