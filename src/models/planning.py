"""
Canonical planning entities and the derived grid views.

Entities are frozen: a sync/load builds new instances instead of mutating old
ones. Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.records import AssignmentSource, AssignmentSyncStatus, SyncSource


class PlanningModel(BaseModel):
    """Base for all planning models: immutable, camelCase aliases."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# ENTITIES
# =============================================================================


class Employee(PlanningModel):
    id: str
    external_reference: str
    name: str
    skills: tuple[str, ...] = ()
    home_location: str
    primary_calendar_url: str = ""
    absence_calendar_url: str = ""
    active: bool = True


class Project(PlanningModel):
    id: str
    external_reference: str
    name: str
    status: str


class AssignmentPeriod(PlanningModel):
    """Inclusive range of YYYY-MM-DD dates."""

    start_date: str
    end_date: str

    def covers(self, iso_day: str) -> bool:
        """Zero-padded ISO dates compare correctly as strings."""
        return self.start_date[:10] <= iso_day[:10] <= self.end_date[:10]


class Assignment(PlanningModel):
    id: str
    employee_id: str
    project_id: str
    period: AssignmentPeriod
    source: AssignmentSource
    sync_status: AssignmentSyncStatus


class SyncIssue(PlanningModel):
    source: SyncSource
    code: str
    message: str
    timestamp: str


# =============================================================================
# GRID VIEWS
# =============================================================================


class WeekDay(PlanningModel):
    index: int  # 0 = Monday .. 4 = Friday
    name: str
    short_name: str
    day: date


class CellWorkItem(PlanningModel):
    """One assignment as shown in a single employee/day cell."""

    id: str
    project_id: str
    title: str
    color: str
    status: str


class WorkItem(PlanningModel):
    """An employee's work on one project across the visible week."""

    id: str
    title: str
    color: str
    days: tuple[int, ...]
    assigned_employee_ids: tuple[str, ...]


class Continuity(PlanningModel):
    is_first_day: bool
    continues_from_previous: bool
    continues_to_next: bool
    is_paused_and_resumed: bool


class CoAssigneeSummary(PlanningModel):
    shown: tuple[Employee, ...] = ()
    overflow: int = 0
    tooltip: str = ""


class GridEntry(PlanningModel):
    item: CellWorkItem
    continuity: Continuity
    co_assignees: CoAssigneeSummary


class GridCell(PlanningModel):
    day_index: int
    is_today: bool
    entries: tuple[GridEntry, ...] = ()


class GridRow(PlanningModel):
    employee: Employee
    cells: tuple[GridCell, ...]


class WeekGrid(PlanningModel):
    week_offset: int
    days: tuple[WeekDay, ...]
    today_index: int | None = None
    rows: tuple[GridRow, ...] = ()
