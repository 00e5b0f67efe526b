"""
Unit tests for text record sources and output formatters.
"""

import io
import json
from types import SimpleNamespace

from namefilter.models.records import FileEntry
from namefilter.models.settings import OutputFormat
from namefilter.tools.formatter import format_json, format_text, get_formatter
from namefilter.tools.sources import read_json_records, read_line_records


class TestReadLineRecords:
    """Test cases for read_line_records."""

    def test_one_record_per_line(self):
        stream = io.StringIO("sshd\ncron\r\n\nnginx")

        records = list(read_line_records(stream))

        assert records == [{"Name": "sshd"}, {"Name": "cron"}, {"Name": ""}, {"Name": "nginx"}]

    def test_custom_attribute(self):
        records = list(read_line_records(io.StringIO("a\n"), name_attribute="Title"))

        assert records == [{"Title": "a"}]


class TestReadJsonRecords:
    """Test cases for read_json_records."""

    def test_decodes_each_line(self):
        stream = io.StringIO('{"Name": "a"}\n\n{"Name": "b", "pid": 2}\n')

        assert list(read_json_records(stream)) == [{"Name": "a"}, {"Name": "b", "pid": 2}]

    def test_invalid_lines_are_skipped(self, caplog):
        stream = io.StringIO('{"Name": "a"}\nnot json\n[1, 2]\n')

        records = list(read_json_records(stream))

        assert records == [{"Name": "a"}, [1, 2]]
        assert "Skipping line 2" in caplog.text


class TestFormatters:
    """Test cases for output formatters."""

    def test_text_for_file_entry_is_path(self):
        entry = FileEntry(name="a.py", path="/src/a.py")

        assert format_text(entry) == "/src/a.py"

    def test_text_for_mapping_is_name(self):
        assert format_text({"Name": "sshd", "pid": 1}) == "sshd"

    def test_text_for_object_is_name(self):
        assert format_text(SimpleNamespace(name="cron")) == "cron"

    def test_text_with_custom_attribute(self):
        assert format_text({"Title": "x", "Name": "y"}, "Title") == "x"

    def test_json_for_file_entry(self):
        entry = FileEntry(name="a.py", path="/src/a.py", size=10)

        data = json.loads(format_json(entry))

        assert data['name'] == "a.py"
        assert data['size_human'] == "10.0 B"

    def test_json_for_mapping(self):
        assert json.loads(format_json({"Name": "sshd", "pid": 1})) == {"Name": "sshd", "pid": 1}

    def test_json_for_object(self):
        assert json.loads(format_json(SimpleNamespace(Name="cron"))) == {"Name": "cron"}

    def test_get_formatter(self):
        record = {"Name": "sshd"}

        assert get_formatter(OutputFormat.TEXT)(record) == "sshd"
        assert json.loads(get_formatter(OutputFormat.JSON)(record)) == {"Name": "sshd"}
