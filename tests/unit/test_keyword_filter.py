"""
Unit tests for the keyword filter pipeline adapter.
"""

import logging
from types import SimpleNamespace
from unittest.mock import patch

import pytest

import namefilter
from namefilter.exceptions import ConfigurationError, NameFilterError
from namefilter.filtering.keyword_filter import KeywordFilter, filter_by_name, fob
from namefilter.filtering.parser import parse_search_terms
from namefilter.models.records import FileEntry


def names(records):
    return [record["Name"] for record in records]


class TestFilterByName:
    """Test cases for filter_by_name."""

    def setup_method(self):
        """Set up shared records."""
        self.fruits = [{"Name": "apple"}, {"Name": "banana"}, {"Name": "cherry"}]
        self.pies = [{"Name": "apple pie"}, {"Name": "apple tart"}, {"Name": "cherry pie"}]

    def test_single_keyword(self):
        """A single keyword returns records whose name contains it."""
        result = list(filter_by_name(["test"], [{"Name": "testObject"}]))

        assert result == [{"Name": "testObject"}]

    def test_or_is_default(self):
        """Several keywords without an operator combine with OR."""
        result = list(filter_by_name(["apple", "cherry"], self.fruits))

        assert names(result) == ["apple", "cherry"]

    def test_and_operator(self):
        result = list(filter_by_name(["apple", "and", "pie"], self.pies))

        assert names(result) == ["apple pie"]

    def test_or_operator(self):
        result = list(filter_by_name(["apple", "or", "cherry"], self.pies))

        assert names(result) == ["apple pie", "apple tart", "cherry pie"]

    def test_null_input(self):
        """A null input stream produces no output and no error."""
        assert list(filter_by_name(["apple"], None)) == []

    def test_null_record_in_stream(self):
        result = list(filter_by_name(["apple"], [None, {"Name": "apple"}, None]))

        assert result == [{"Name": "apple"}]

    def test_empty_input(self):
        assert list(filter_by_name(["apple"], [])) == []

    def test_records_without_names_are_excluded(self):
        records = [
            {"Name": None},
            {"Name": ""},
            {"Name": "  "},
            {"Other": "apple"},
            SimpleNamespace(size=3),
            {"Name": "apple"},
        ]

        assert list(filter_by_name(["apple"], records)) == [{"Name": "apple"}]

    def test_order_is_preserved(self):
        records = [{"Name": f"item-{i}"} for i in range(10)]
        records.reverse()

        result = list(filter_by_name(["item"], records))

        assert result == records

    def test_records_are_passed_through_unchanged(self):
        record = SimpleNamespace(Name="apple", size=10)

        result = list(filter_by_name("apple", [record]))

        assert result[0] is record

    def test_single_mapping_is_one_record(self):
        assert list(filter_by_name("apple", {"Name": "apple"})) == [{"Name": "apple"}]

    def test_single_object_is_one_record(self):
        record = SimpleNamespace(Name="apple")

        assert list(filter_by_name("apple", record)) == [record]

    def test_single_model_is_one_record(self):
        """A pydantic record is not iterated field by field."""
        entry = FileEntry(name="apple.txt", path="/tmp/apple.txt")

        assert list(filter_by_name(["apple"], entry)) == [entry]
        assert list(filter_by_name(["cherry"], entry)) == []

    def test_generator_input_is_consumed_lazily(self):
        consumed = []

        def source():
            for name in ["apple", "banana", "apple pie"]:
                consumed.append(name)
                yield {"Name": name}

        result = filter_by_name(["apple"], source())
        assert consumed == []

        assert next(result) == {"Name": "apple"}
        assert consumed == ["apple"]

    def test_empty_keywords_raise_before_reading_records(self):
        """A configuration error is raised at call time; no record is read."""
        consumed = []

        def source():
            consumed.append(True)
            yield {"Name": "apple"}

        with pytest.raises(ConfigurationError):
            filter_by_name(["and", " "], source())

        assert consumed == []

    def test_configuration_error_is_a_namefilter_error(self):
        with pytest.raises(NameFilterError):
            filter_by_name([], [])

    def test_custom_name_attribute(self):
        records = [{"ServiceName": "sshd"}, {"ServiceName": "cron"}]

        result = list(filter_by_name(["ssh"], records, name_attribute="ServiceName"))

        assert result == [{"ServiceName": "sshd"}]

    def test_alias(self):
        """The short alias behaves exactly like the full name."""
        assert fob is filter_by_name
        assert namefilter.fob is namefilter.filter_by_name
        assert list(fob(["apple", "and", "pie"], self.pies)) == [{"Name": "apple pie"}]

    def test_filtering_opens_no_files(self):
        """Records are matched from their attributes alone."""
        records = [{"Name": "apple pie"}, SimpleNamespace(name="cherry pie")]

        with patch("builtins.open", side_effect=AssertionError("file opened")):
            result = list(filter_by_name(["pie"], records))

        assert result == records

    def test_separate_calls_do_not_share_configuration(self):
        first = filter_by_name(["apple"], self.fruits)
        second = filter_by_name(["banana"], self.fruits)

        assert names(second) == ["banana"]
        assert names(first) == ["apple"]


class TestKeywordFilter:
    """Test cases for the KeywordFilter class."""

    def test_stats(self):
        keyword_filter = KeywordFilter(parse_search_terms(["apple"]))
        records = [{"Name": "apple"}, {"Name": "banana"}, None, {"Name": ""}]

        result = list(keyword_filter.filter(records))

        assert result == [{"Name": "apple"}]
        assert keyword_filter.get_stats() == {
            'records_seen': 4,
            'records_matched': 1,
            'records_dropped': 3,
        }

    def test_reset_stats(self):
        keyword_filter = KeywordFilter.from_terms(["apple"])
        list(keyword_filter.filter([{"Name": "apple"}]))

        keyword_filter.reset_stats()

        assert keyword_filter.get_stats()['records_seen'] == 0

    def test_get_stats_returns_copy(self):
        keyword_filter = KeywordFilter.from_terms(["apple"])
        stats = keyword_filter.get_stats()
        stats['records_seen'] = 99

        assert keyword_filter.get_stats()['records_seen'] == 0

    def test_matches_single_record(self):
        keyword_filter = KeywordFilter.from_terms(["a", "and", "b"])

        assert keyword_filter.matches({"Name": "ab"})
        assert not keyword_filter.matches({"Name": "a"})

    def test_from_terms_raises_for_no_keywords(self):
        with pytest.raises(ConfigurationError):
            KeywordFilter.from_terms(["or"])

    def test_decisions_are_traced(self, caplog):
        caplog.set_level(logging.DEBUG, logger="namefilter")

        list(filter_by_name(["apple", "and", "pie"], [{"Name": "apple pie"}, {"Name": None}]))

        assert "selects AND logic" in caplog.text
        assert "Match: 'apple pie'" in caplog.text
        assert "Skipping record with null 'Name'" in caplog.text
