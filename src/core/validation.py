"""
Structural validation of externally sourced records.

Every record type has a decoder that returns either the validated value or a
DecodeError listing what is wrong with it, and a boolean guard built on top.
Nothing here raises on bad input.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from models.planning import Assignment, SyncIssue
from models.records import AssignmentRecord, ContactRecord, ProjectRecord, SyncIssueRecord

T = TypeVar("T")

_project_adapter = TypeAdapter(ProjectRecord)
_contact_adapter = TypeAdapter(ContactRecord)
_assignment_adapter = TypeAdapter(AssignmentRecord)
_sync_issue_adapter = TypeAdapter(SyncIssueRecord)


@dataclass(frozen=True)
class DecodeError:
    """Why a record was rejected."""

    record_type: str
    problems: tuple[str, ...] = ()
    index: int | None = None  # position in the input list, when decoded in bulk

    def __str__(self) -> str:
        where = f"{self.record_type} record" if self.index is None else f"{self.record_type} record #{self.index}"
        return f"Invalid {where}: " + "; ".join(self.problems)


def _problems(exc: ValidationError) -> tuple[str, ...]:
    """Flatten pydantic errors into 'field.path: message' lines."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        problems.append(f"{location}: {error['msg']}")
    return tuple(problems)


def _decode(adapter: TypeAdapter, record_type: str, value: Any) -> Any:
    try:
        return adapter.validate_python(value, strict=True)
    except ValidationError as e:
        return DecodeError(record_type, _problems(e))


# =============================================================================
# DECODERS
# =============================================================================


def decode_project_record(value: Any) -> ProjectRecord | DecodeError:
    """Accept a dict with string `self` and `name`, and a string `status` if present."""
    return _decode(_project_adapter, "project", value)


def decode_contact_record(value: Any) -> ContactRecord | DecodeError:
    """Accept a dict with string `self`; name parts must be strings when present."""
    return _decode(_contact_adapter, "contact", value)


def decode_assignment(value: Any) -> Assignment | DecodeError:
    """
    Decode a camelCase assignment object into an Assignment.

    All of id, employeeId, projectId, period.startDate and period.endDate must
    be strings, and source/syncStatus must be recognized values.
    """
    record = _decode(_assignment_adapter, "assignment", value)
    if isinstance(record, DecodeError):
        return record
    return Assignment.model_validate(record)


def decode_sync_issue(value: Any) -> SyncIssue | DecodeError:
    record = _decode(_sync_issue_adapter, "sync issue", value)
    if isinstance(record, DecodeError):
        return record
    return SyncIssue.model_validate(record)


def decode_many(
    values: Iterable[Any], decoder: Callable[[Any], T | DecodeError]
) -> tuple[list[T], list[DecodeError]]:
    """
    Decode a list of records, keeping input order.

    Returns:
        Tuple of (accepted values, errors for the rejected ones tagged with their index)
    """
    accepted: list[T] = []
    rejected: list[DecodeError] = []
    for index, value in enumerate(values):
        result = decoder(value)
        if isinstance(result, DecodeError):
            rejected.append(DecodeError(result.record_type, result.problems, index))
        else:
            accepted.append(result)
    return accepted, rejected


# =============================================================================
# GUARDS
# =============================================================================


def is_project_record(value: Any) -> bool:
    return not isinstance(decode_project_record(value), DecodeError)


def is_contact_record(value: Any) -> bool:
    return not isinstance(decode_contact_record(value), DecodeError)


def is_assignment(value: Any) -> bool:
    return not isinstance(decode_assignment(value), DecodeError)


def is_sync_issue(value: Any) -> bool:
    return not isinstance(decode_sync_issue(value), DecodeError)
