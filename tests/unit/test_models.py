"""Unit tests for help models."""

import pytest

from src.lib.exceptions import MissingIdentifierError, ValidationError
from src.models import CrossReference, HelpEntry, HelpRequest, NotFound


class TestHelpEntry:
    """Tests for HelpEntry validation and aliases."""

    def test_definition_keys(self):
        """Entries load from the keys used in definition files."""
        entry = HelpEntry.model_validate(
            {
                "Headline": "Title",
                "Text": "Body %s",
                "SeeAlso": [{"text": "Other", "link": "help.php?HelpNumber=2"}],
            }
        )

        assert entry.headline == "Title"
        assert entry.body == "Body %s"
        assert entry.is_external is False
        assert entry.see_also == (CrossReference(text="Other", link="help.php?HelpNumber=2"),)

    @pytest.mark.parametrize(
        "flag,expected",
        [("TRUE", True), ("FALSE", False), ("true", False), (" TRUE", False)],
    )
    def test_external_flag_strings(self, flag, expected):
        data = {"ext": flag, "Link": "page.inc", "Text": "unused"}

        assert HelpEntry.model_validate(data).is_external is expected

    def test_non_list_see_also_is_empty(self):
        entry = HelpEntry.model_validate({"Text": "Body", "SeeAlso": "none"})

        assert entry.see_also == ()

    def test_external_requires_link(self):
        with pytest.raises(ValidationError) as exc_info:
            HelpEntry(is_external=True)

        assert exc_info.value.field == "link"

    def test_templated_requires_body(self):
        with pytest.raises(ValidationError) as exc_info:
            HelpEntry(headline="No body")

        assert exc_info.value.field == "body"

    def test_empty_cross_reference_text_rejected(self):
        with pytest.raises(ValidationError):
            CrossReference(text="  ")

    def test_entry_is_frozen(self):
        entry = HelpEntry(body="Body")

        with pytest.raises(Exception):
            entry.body = "Changed"


class TestHelpRequest:
    """Tests for building requests from parameters."""

    def test_collects_contiguous_variables(self):
        request = HelpRequest.from_query({"HelpNumber": "201", "var1": "a", "var2": "b"})

        assert request.variables == ("a", "b")

    def test_collection_starts_at_one(self):
        """A gap at var1 means no variables at all."""
        request = HelpRequest.from_query({"HelpNumber": "201", "var2": "b"})

        assert request.variables == ()

    def test_collection_stops_at_first_gap(self):
        params = {"HelpNumber": "201", "var1": "a", "var3": "c"}

        assert HelpRequest.from_query(params).variables == ("a",)

    def test_module_and_scope(self):
        request = HelpRequest.from_query(
            {"HelpNumber": "uid", "module": "posixAccount", "scope": "host"}
        )

        assert request.identifier == "uid"
        assert request.module == "posixAccount"
        assert request.scope == "host"

    def test_identifier_kept_as_submitted(self):
        request = HelpRequest.from_query({"HelpNumber": " 201 "})

        assert request.identifier == " 201 "

    def test_whitespace_identifier_is_not_missing(self):
        assert HelpRequest.from_query({"HelpNumber": "  "}).identifier == "  "

    @pytest.mark.parametrize("params", [{}, {"HelpNumber": ""}, {"var1": "a"}])
    def test_missing_identifier(self, params):
        with pytest.raises(MissingIdentifierError):
            HelpRequest.from_query(params)


class TestNotFound:
    """Tests for the NotFound result."""

    def test_carries_identifier_and_module(self):
        result = NotFound(identifier="42", module="posixAccount")

        assert result.identifier == "42"
        assert result.module == "posixAccount"

    def test_module_defaults_to_none(self):
        assert NotFound(identifier="42").module is None
