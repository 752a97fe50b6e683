"""
Assignment resolution: which projects an employee works on, per day and per week.

References between records may be raw Daylite references ('/v1/projects/3001')
or derived ids ('3001'); both are reduced with extract_object_id before any
lookup, so either form resolves to the same entity.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from core.config import ACTIVE_EMPLOYEE_KEYWORD, PROJECT_STATUS_COLORS, UNKNOWN_STATUS
from core.validation import (
    DecodeError,
    decode_assignment,
    decode_contact_record,
    decode_many,
    decode_project_record,
    decode_sync_issue,
)
from models.planning import Assignment, CellWorkItem, Employee, Project, SyncIssue, WorkItem
from models.records import AssignmentTemplate
from services.calendar import as_calendar_day
from services.contacts import (
    extract_object_id,
    filter_active_contacts,
    map_contact_to_employee,
    map_project_record_to_project,
)


def as_iso_day(day: date | datetime | str) -> str:
    """YYYY-MM-DD for dates, datetimes and ISO strings alike."""
    if isinstance(day, str):
        return day[:10]
    return as_calendar_day(day).isoformat()


def status_color(status: str | None) -> str:
    return PROJECT_STATUS_COLORS.get(status or UNKNOWN_STATUS, PROJECT_STATUS_COLORS[UNKNOWN_STATUS])


# =============================================================================
# STAFFING PLAN
# =============================================================================


class StaffingPlan:
    """Read-only view over one load of assignments and projects."""

    def __init__(self, assignments: Iterable[Assignment], projects: Iterable[Project]):
        self._assignments = tuple(assignments)
        self._projects: dict[str, Project] = {}
        for project in projects:
            self._projects.setdefault(project.id, project)

    @property
    def assignments(self) -> tuple[Assignment, ...]:
        return self._assignments

    def project_for(self, reference: str) -> Project | None:
        return self._projects.get(extract_object_id(reference))

    def cell_item(self, assignment: Assignment) -> CellWorkItem:
        """Display data for an assignment; dangling project references fall back to the raw reference."""
        project = self.project_for(assignment.project_id)
        status = project.status if project else UNKNOWN_STATUS
        return CellWorkItem(
            id=assignment.id,
            project_id=extract_object_id(assignment.project_id),
            title=project.name if project else assignment.project_id,
            color=status_color(status),
            status=status,
        )

    def assignments_for_cell(self, employee_id: str, day: date | datetime | str) -> list[Assignment]:
        employee_key = extract_object_id(employee_id)
        iso_day = as_iso_day(day)
        return [
            assignment
            for assignment in self._assignments
            if extract_object_id(assignment.employee_id) == employee_key
            and assignment.period.covers(iso_day)
        ]

    def work_items_for_cell(self, employee_id: str, day: date | datetime | str) -> list[CellWorkItem]:
        """Assignments of `employee_id` covering `day`, in insertion order."""
        return [self.cell_item(a) for a in self.assignments_for_cell(employee_id, day)]

    def work_items_for_week(
        self, employee_id: str, week_days: list[date]
    ) -> list[WorkItem]:
        """
        Group an employee's assignments in the given week by project.

        Each WorkItem's days are the week indices (0=Monday) the employee works
        on that project; assigned_employee_ids lists everyone on the project
        that week, in order of first appearance.
        """
        employee_key = extract_object_id(employee_id)
        iso_days = [as_iso_day(d) for d in week_days]

        first_assignment: dict[str, Assignment] = {}
        days_by_project: dict[str, set[int]] = defaultdict(set)
        assignees_by_project: dict[str, list[str]] = defaultdict(list)

        for assignment in self._assignments:
            covered = [i for i, iso_day in enumerate(iso_days) if assignment.period.covers(iso_day)]
            if not covered:
                continue

            project_key = extract_object_id(assignment.project_id)
            person = extract_object_id(assignment.employee_id)
            if person not in assignees_by_project[project_key]:
                assignees_by_project[project_key].append(person)

            if person == employee_key:
                first_assignment.setdefault(project_key, assignment)
                days_by_project[project_key].update(covered)

        work_items = []
        for project_key, assignment in first_assignment.items():
            view = self.cell_item(assignment)
            work_items.append(
                WorkItem(
                    id=project_key,
                    title=view.title,
                    color=view.color,
                    days=tuple(sorted(days_by_project[project_key])),
                    assigned_employee_ids=tuple(assignees_by_project[project_key]),
                )
            )
        return work_items


def resolve_work_items_for_cell(
    plan: StaffingPlan, employee_id: str, day: date | datetime | str
) -> list[CellWorkItem]:
    return plan.work_items_for_cell(employee_id, day)


# =============================================================================
# SNAPSHOT LOADING
# =============================================================================


@dataclass
class PlanningSnapshot:
    """Everything decoded and mapped from one planning payload."""

    employees: list[Employee]
    projects: list[Project]
    assignments: list[Assignment]
    sync_issues: list[SyncIssue] = field(default_factory=list)
    rejected: list[DecodeError] = field(default_factory=list)

    def plan(self) -> StaffingPlan:
        return StaffingPlan(self.assignments, self.projects)


def expand_assignment_templates(templates: Iterable[AssignmentTemplate]) -> list[Any]:
    """
    Expand templates into single-day assignment objects, one per employee and day.

    Ids follow '{template id}-{employee id}-{day}'. The results still go
    through decode_assignment, so bad template values surface as rejections.
    """
    assignments: list[Any] = []
    for template in templates:
        if not isinstance(template, dict):
            assignments.append(template)  # rejected by the assignment decoder
            continue

        for employee_id in template.get("employeeIds") or []:
            for day in template.get("days") or []:
                assignments.append(
                    {
                        "id": f"{template.get('id')}-{employee_id}-{day}",
                        "employeeId": employee_id,
                        "projectId": template.get("projectId"),
                        "period": {"startDate": day, "endDate": day},
                        "source": template.get("source"),
                        "syncStatus": template.get("syncStatus"),
                    }
                )
    return assignments


def _records(payload: dict, key: str, rejected: list[DecodeError]) -> list:
    value = payload.get(key)
    if value is None:
        return []
    if isinstance(value, list):
        return value
    rejected.append(DecodeError(key, (f"{key}: expected a list",)))
    return []


def build_snapshot(payload: dict, active_keyword: str = ACTIVE_EMPLOYEE_KEYWORD) -> PlanningSnapshot:
    """
    Decode and map a planning payload.

    Invalid records are skipped and reported in `rejected`; they never abort
    the load.

    Args:
        payload: Dict with optional contacts, projects, assignments,
            assignmentTemplates and syncIssues lists
        active_keyword: Contact keyword selecting grid rows ("" keeps all)
    """
    rejected: list[DecodeError] = []

    contacts, errors = decode_many(_records(payload, "contacts", rejected), decode_contact_record)
    rejected.extend(errors)

    project_records, errors = decode_many(_records(payload, "projects", rejected), decode_project_record)
    rejected.extend(errors)

    raw_assignments = _records(payload, "assignments", rejected) + expand_assignment_templates(
        _records(payload, "assignmentTemplates", rejected)
    )
    assignments, errors = decode_many(raw_assignments, decode_assignment)
    rejected.extend(errors)

    sync_issues, errors = decode_many(_records(payload, "syncIssues", rejected), decode_sync_issue)
    rejected.extend(errors)

    return PlanningSnapshot(
        employees=[map_contact_to_employee(c) for c in filter_active_contacts(contacts, active_keyword)],
        projects=[map_project_record_to_project(p) for p in project_records],
        assignments=assignments,
        sync_issues=sync_issues,
        rejected=rejected,
    )
