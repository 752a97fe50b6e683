"""
Visual continuity of work items across the days of a week.
"""

from collections.abc import Iterable, Mapping

from core.config import CO_ASSIGNEE_TOOLTIP_PREFIX, MAX_VISIBLE_CO_ASSIGNEES
from models.planning import CoAssigneeSummary, Continuity, Employee
from services.contacts import extract_object_id


def analyze_continuity(days: Iterable[int], day: int) -> Continuity:
    """
    Work out how the badge for `day` joins its neighbours.

    A paused-and-resumed day is one that is not the item's first day but does
    not follow directly on from the previous day either.
    """
    day_set = set(days)
    is_first_day = bool(day_set) and min(day_set) == day
    continues_from_previous = (day - 1) in day_set
    has_earlier_day = any(d < day for d in day_set)

    return Continuity(
        is_first_day=is_first_day,
        continues_from_previous=continues_from_previous,
        continues_to_next=(day + 1) in day_set,
        is_paused_and_resumed=has_earlier_day and not continues_from_previous and not is_first_day,
    )


def resolve_co_assignees(
    assigned_employee_ids: Iterable[str],
    current_employee_id: str,
    employees_by_id: Mapping[str, Employee],
) -> list[Employee]:
    """Other employees on the same item; ids that do not resolve are dropped."""
    current = extract_object_id(current_employee_id)
    co_assignees = []
    for employee_id in assigned_employee_ids:
        key = extract_object_id(employee_id)
        if key == current:
            continue
        employee = employees_by_id.get(key)
        if employee is not None:
            co_assignees.append(employee)
    return co_assignees


def summarize_co_assignees(
    co_assignees: list[Employee], limit: int = MAX_VISIBLE_CO_ASSIGNEES
) -> CoAssigneeSummary:
    """Split co-assignees into the ones shown and an overflow count."""
    if not co_assignees:
        return CoAssigneeSummary()

    limit = max(limit, 0)
    return CoAssigneeSummary(
        shown=tuple(co_assignees[:limit]),
        overflow=max(len(co_assignees) - limit, 0),
        tooltip=CO_ASSIGNEE_TOOLTIP_PREFIX + ", ".join(e.name for e in co_assignees),
    )
