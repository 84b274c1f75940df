import pytest

from guidance.schemas.guidance import SearchType
from guidance.services.validation import SearchValidationError, first_error, validate_search_query


class TestValidateSearchQuery:
    def test_valid_payload(self):
        q = validate_search_query({"type": "related_careers", "query": "Biology"})
        assert q.type is SearchType.RELATED_CAREERS
        assert q.query == "Biology"

    def test_query_is_immutable(self):
        q = validate_search_query({"type": "job_apps", "query": "Nurse"})
        with pytest.raises(Exception):
            q.query = "Doctor"

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"query": "x"}, "type"),
            ({"type": "careers", "query": "x"}, "type"),
            ({"type": "job_apps"}, "query"),
            ({"type": "job_apps", "query": ""}, "query"),
            ({"type": "job_apps", "query": None}, "query"),
            ({}, "type"),
        ],
    )
    def test_field_of_first_error(self, payload, field):
        with pytest.raises(SearchValidationError) as exc_info:
            validate_search_query(payload)
        assert exc_info.value.field == field
        assert exc_info.value.message

    @pytest.mark.parametrize("payload", [None, [], "job_apps", 3])
    def test_non_object_payload(self, payload):
        with pytest.raises(SearchValidationError) as exc_info:
            validate_search_query(payload)
        assert exc_info.value.field == ""


class TestFirstError:
    def test_strips_body_prefix(self):
        errors = [{"loc": ("body", "results", 0, "title"), "msg": "Field required"}]
        assert first_error(errors) == ("Field required", "results.0.title")

    def test_uses_only_first(self):
        errors = [
            {"loc": ("type",), "msg": "bad type"},
            {"loc": ("query",), "msg": "bad query"},
        ]
        assert first_error(errors) == ("bad type", "type")

    def test_empty_list(self):
        assert first_error([]) == ("Invalid request", "")
