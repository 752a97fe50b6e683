"""
Tests for the external record guards and decoders.
"""

import pytest

from core.validation import (
    DecodeError,
    decode_assignment,
    decode_contact_record,
    decode_many,
    decode_project_record,
    decode_sync_issue,
    is_assignment,
    is_contact_record,
    is_project_record,
    is_sync_issue,
)
from models.planning import Assignment, SyncIssue


class TestProjectRecords:
    def test_accepts_valid_project(self, sample_project):
        assert is_project_record(sample_project)

    def test_status_is_optional(self):
        assert is_project_record({"self": "/v1/projects/7000", "name": "Sell Sea Shells"})

    def test_any_status_string_is_accepted(self):
        assert is_project_record({"self": "/v1/projects/7000", "name": "x", "status": "new_status"})

    @pytest.mark.parametrize(
        "raw",
        [
            {"self": 7000, "name": "Sell Sea Shells"},
            {"self": "", "name": "Sell Sea Shells"},
            {"self": "/v1/projects/7000"},
            {"self": "/v1/projects/7000", "name": "x", "status": 3},
            {"self": "/v1/projects/7000", "name": "x", "status": None},
            None,
            "project",
            ["/v1/projects/7000", "x"],
        ],
    )
    def test_rejects_invalid_project(self, raw):
        assert not is_project_record(raw)

    def test_decode_reports_failing_field(self):
        result = decode_project_record({"self": 7000, "name": "Sell Sea Shells"})

        assert isinstance(result, DecodeError)
        assert result.record_type == "project"
        assert any(problem.startswith("self:") for problem in result.problems)

    def test_decode_keeps_known_fields(self, sample_project):
        assert decode_project_record(sample_project) == sample_project


class TestContactRecords:
    def test_accepts_valid_contact(self, sample_contact):
        assert is_contact_record(sample_contact)

    def test_accepts_reference_only_contact(self):
        assert is_contact_record({"self": "/v1/contacts/1000"})

    def test_accepts_full_name_schema(self):
        assert is_contact_record({"self": "/v1/contacts/1000", "full_name": "Anna", "nickname": "A"})

    @pytest.mark.parametrize("field", ["first_name", "middle_name", "last_name", "full_name", "nickname"])
    def test_rejects_non_string_name_parts(self, field):
        assert not is_contact_record({"self": "/v1/contacts/1000", field: 42})
        assert not is_contact_record({"self": "/v1/contacts/1000", field: None})

    def test_rejects_empty_reference(self):
        result = decode_contact_record({"self": "", "full_name": "Anna Schmidt"})

        assert isinstance(result, DecodeError)
        assert result.problems[0].startswith("self:")

    def test_rejects_missing_reference(self):
        result = decode_contact_record({"first_name": "Thomas"})

        assert isinstance(result, DecodeError)
        assert "self" in str(result)

    def test_unvalidated_fields_pass_through(self):
        raw = {"self": "/v1/contacts/1000", "urls": "not-a-list", "extra_fields": "{"}

        assert decode_contact_record(raw) == raw


class TestAssignments:
    def test_accepts_valid_assignment(self, sample_assignment):
        assert is_assignment(sample_assignment)

    def test_decodes_to_entity(self, sample_assignment):
        assignment = decode_assignment(sample_assignment)

        assert isinstance(assignment, Assignment)
        assert assignment.employee_id == "/v1/contacts/1000"
        assert assignment.period.start_date == "2026-01-26"
        assert assignment.sync_status == "synced"

    @pytest.mark.parametrize("source", ["manual", "daylite", "planradar", "ical"])
    def test_accepts_every_source(self, sample_assignment, source):
        assert is_assignment({**sample_assignment, "source": source})

    @pytest.mark.parametrize(
        "changes",
        [
            {"source": "other"},
            {"source": "app"},
            {"syncStatus": "done"},
            {"id": 1},
            {"employeeId": None},
            {"projectId": ["/v1/projects/7000"]},
            {"period": "2026-01-26/2026-01-28"},
            {"period": {"startDate": "2026-01-26"}},
            {"period": {"startDate": "2026-01-26", "endDate": 20260128}},
        ],
    )
    def test_rejects_any_mismatch(self, sample_assignment, changes):
        assert not is_assignment({**sample_assignment, **changes})

    def test_decode_error_lists_every_problem(self, sample_assignment):
        result = decode_assignment({**sample_assignment, "source": "other", "syncStatus": "done"})

        assert isinstance(result, DecodeError)
        assert len(result.problems) == 2
        assert result.problems[0].startswith("source:")
        assert result.problems[1].startswith("syncStatus:")


class TestSyncIssues:
    def test_accepts_valid_issue(self):
        issue = {"source": "planradar", "code": "HTTP_500", "message": "boom", "timestamp": "2026-01-26T08:00:00Z"}

        assert is_sync_issue(issue)
        assert isinstance(decode_sync_issue(issue), SyncIssue)

    @pytest.mark.parametrize(
        "raw",
        [
            {"source": "outlook", "code": "X", "message": "m", "timestamp": "t"},
            {"source": "daylite", "code": 500, "message": "m", "timestamp": "t"},
            {"source": "daylite", "code": "X", "message": "m"},
            None,
        ],
    )
    def test_rejects_invalid_issue(self, raw):
        assert not is_sync_issue(raw)


class TestDecodeMany:
    def test_splits_and_indexes_rejections(self, sample_project):
        accepted, rejected = decode_many(
            [sample_project, {"self": 1}, {**sample_project, "name": "Other"}, None],
            decode_project_record,
        )

        assert [p["name"] for p in accepted] == ["Sell Sea Shells", "Other"]
        assert [error.index for error in rejected] == [1, 3]
        assert str(rejected[0]).startswith("Invalid project record #1: ")

    def test_guards_are_deterministic(self, sample_assignment):
        results = {is_assignment(sample_assignment) for _ in range(3)}

        assert results == {True}
