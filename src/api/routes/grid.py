"""Staffing grid endpoint."""

from fastapi import APIRouter

from api.models.responses import GridRequest, GridResponse
from core.config import ACTIVE_EMPLOYEE_KEYWORD
from services.calendar import today_in_planning_timezone
from services.grid import build_week_grid
from services.planning import build_snapshot

router = APIRouter(prefix="/v1")


@router.post("/grid", response_model=GridResponse)
def render_grid_endpoint(request: GridRequest) -> GridResponse:
    """Render the staffing grid for one week. Invalid records are listed in `rejected`."""
    payload = {
        "contacts": request.contacts,
        "projects": request.projects,
        "assignments": request.assignments,
        "assignmentTemplates": request.assignment_templates,
        "syncIssues": request.sync_issues,
    }
    keyword = ACTIVE_EMPLOYEE_KEYWORD if request.keyword is None else request.keyword
    snapshot = build_snapshot(payload, active_keyword=keyword)

    today = request.today or today_in_planning_timezone()
    grid = build_week_grid(snapshot, request.week_offset, today)

    return GridResponse(
        grid=grid,
        rejected=[str(error) for error in snapshot.rejected],
        sync_issues=snapshot.sync_issues,
    )
