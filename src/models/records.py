"""
Shapes of externally sourced records.

Daylite hands us loosely typed JSON; these TypedDicts describe the fields we
read. They double as pydantic validation schemas (see core.validation), which
is why they come from typing_extensions rather than typing.
"""

from typing import Annotated, Any, Literal

from pydantic import StringConstraints
from typing_extensions import NotRequired, TypedDict

AssignmentSource = Literal["manual", "daylite", "planradar", "ical"]
AssignmentSyncStatus = Literal["pending", "synced", "failed"]
SyncSource = Literal["daylite", "planradar", "ical", "manual"]

# Daylite object reference, e.g. "/v1/contacts/1000"
Reference = Annotated[str, StringConstraints(min_length=1)]


class ProjectRecord(TypedDict):
    """Daylite project as returned by /v1/projects."""
    self: Reference
    name: str
    status: NotRequired[str]
    category: NotRequired[Any]
    keywords: NotRequired[Any]
    due: NotRequired[Any]
    started: NotRequired[Any]
    create_date: NotRequired[Any]
    modify_date: NotRequired[Any]


class ContactRecord(TypedDict):
    """Daylite contact. Name parts come either split or as full_name/nickname."""
    self: Reference
    first_name: NotRequired[str]
    middle_name: NotRequired[str]
    last_name: NotRequired[str]
    full_name: NotRequired[str]
    nickname: NotRequired[str]
    category: NotRequired[Any]
    keywords: NotRequired[Any]
    urls: NotRequired[Any]
    addresses: NotRequired[Any]
    extra_fields: NotRequired[Any]


class AssignmentPeriodRecord(TypedDict):
    startDate: str
    endDate: str


class AssignmentRecord(TypedDict):
    id: str
    employeeId: str
    projectId: str
    period: AssignmentPeriodRecord
    source: AssignmentSource
    syncStatus: AssignmentSyncStatus


class SyncIssueRecord(TypedDict):
    source: SyncSource
    code: str
    message: str
    timestamp: str


class AssignmentTemplate(TypedDict):
    """Compact authoring form: one entry per project with explicit day lists."""
    id: str
    projectId: str
    days: list[str]
    employeeIds: list[str]
    source: str
    syncStatus: str
