"""
Tests for JSON extraction from model output and type coercion helpers.
"""

import pytest

from career_guide.services.llm_json import (
    JSONExtractionError,
    as_number,
    as_score,
    as_str,
    as_str_list,
    extract_json,
    extract_json_array,
    extract_json_object,
    strip_code_fence,
)


class TestStripCodeFence:
    """Tests for fence removal."""

    def test_plain_text_untouched(self):
        assert strip_code_fence('  [1, 2]  ') == "[1, 2]"

    def test_json_fence(self):
        assert strip_code_fence('```json\n[{"a": 1}]\n```') == '[{"a": 1}]'

    def test_fence_without_language(self):
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_other_language_tag(self):
        assert strip_code_fence('```javascript\n[]\n```') == "[]"

    def test_uppercase_tag(self):
        assert strip_code_fence('```JSON\n[]\n```') == "[]"


class TestExtractJsonArray:
    """Tests for array extraction."""

    def test_fenced_array(self):
        """Fenced output parses the same as bare output."""
        text = '```json\n[{"question": "Q?"}]\n```'
        assert extract_json_array(text) == [{"question": "Q?"}]

    def test_bare_array(self):
        assert extract_json_array('[1, 2, 3]') == [1, 2, 3]

    def test_object_rejected(self):
        with pytest.raises(JSONExtractionError, match="not an array"):
            extract_json_array('{"questions": []}')

    def test_invalid_json_rejected(self):
        with pytest.raises(JSONExtractionError):
            extract_json_array("Sure! Here are your questions: [")

    def test_prose_around_array_rejected(self):
        """Only the fence is tolerated, surrounding prose is not scanned."""
        with pytest.raises(JSONExtractionError):
            extract_json_array('Here you go:\n[1, 2]')

    def test_empty_text(self):
        with pytest.raises(JSONExtractionError):
            extract_json("")

    def test_extraction_error_is_value_error(self):
        with pytest.raises(ValueError):
            extract_json_array("nope")


class TestExtractJsonObject:
    """Tests for object extraction with required keys."""

    def test_required_keys_present(self):
        data = extract_json_object('{"root": {}, "branches": []}', required=("root", "branches"))
        assert data["branches"] == []

    def test_missing_key(self):
        with pytest.raises(JSONExtractionError, match="branches"):
            extract_json_object('{"root": {}}', required=("root", "branches"))

    def test_array_rejected(self):
        with pytest.raises(JSONExtractionError, match="not an object"):
            extract_json_object("[]")


class TestCoercion:
    """Tests for defensive coercion helpers."""

    def test_as_str(self):
        assert as_str(None) == ""
        assert as_str(None, default="Question 3") == "Question 3"
        assert as_str(42) == "42"
        assert as_str(True) == "true"

    def test_as_number(self):
        assert as_number(85) == 85.0
        assert as_number("85") == 85.0
        assert as_number(" 12.5 ") == 12.5
        assert as_number("high") == 0.0
        assert as_number(None) == 0.0
        assert as_number([1]) == 0.0
        assert as_number(float("nan")) == 0.0

    def test_as_score_clamps(self):
        assert as_score(92) == 92
        assert as_score(87.6) == 88
        assert as_score(150) == 100
        assert as_score(-5) == 0
        assert as_score("n/a") == 0

    def test_as_str_list(self):
        assert as_str_list(["Python", 3]) == ["Python", "3"]
        assert as_str_list("Python, SQL") == []
        assert as_str_list(None) == []
