"""Unit tests for structured logging."""

import json
import logging
import sys

import pytest

from redisearch_schema.observability import JsonFormatter, configure_logging
from redisearch_schema.schema import FieldType, Options, new_geo_field, new_schema, new_tag_field


def _record(msg, level=logging.INFO, name="redisearch_schema.schema"):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="schema.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJsonFormatter:
    """Tests for structured JSON logging."""

    def test_format_includes_core_keys(self):
        data = json.loads(JsonFormatter().format(_record("added field")))

        assert data["message"] == "added field"
        assert data["level"] == "INFO"
        assert data["logger"] == "redisearch_schema.schema"
        assert data["component"] == "schema"
        assert "timestamp" in data

    def test_format_includes_extra_fields(self):
        record = _record("built schema")
        record.index = "products"
        record.field_count = 3

        data = json.loads(JsonFormatter().format(record))

        assert data["index"] == "products"
        assert data["field_count"] == 3

    def test_format_truncates_long_messages(self):
        data = json.loads(JsonFormatter().format(_record("x" * 5000)))

        assert data["message"].endswith("...")
        assert len(data["message"]) == JsonFormatter.MAX_MESSAGE_LEN + 3

    def test_format_groups_field_details_under_schema(self):
        record = _record("Added tag field 'tags' (position 0)", level=logging.DEBUG)
        record.field = "tags"
        record.field_type = "tag"
        record.position = 0
        record.sortable = False
        record.index = "products"

        data = json.loads(JsonFormatter().format(record))

        assert data["schema"] == {"field": "tags", "field_type": "tag", "position": 0, "sortable": False}
        assert data["index"] == "products"
        assert "field" not in data

    def test_format_without_field_details_has_no_schema_key(self):
        data = json.loads(JsonFormatter().format(_record("plain")))

        assert "schema" not in data

    def test_format_includes_exception(self):
        try:
            raise ValueError("bad field")
        except ValueError:
            record = logging.LogRecord("test", logging.ERROR, "t.py", 1, "failed", (), sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad field" in data["exception"]

    def test_json_default_renders_schema_values(self):
        formatter = JsonFormatter()

        assert formatter._json_default(FieldType.TAG) == "tag"
        assert formatter._json_default(new_geo_field("location")) == {"name": "location", "type": "geo"}
        assert formatter._json_default(Options(stopwords=("the",)))["stopwords"] == ["the"]
        assert formatter._json_default({3, 1, 2}) == [1, 2, 3]

    def test_json_default_handles_unorderable_set(self):
        value = JsonFormatter()._json_default({1, "a"})

        assert isinstance(value, list)
        assert len(value) == 2


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_configure_logging_sets_level(self):
        configure_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_replaces_handlers(self):
        configure_logging(level="INFO")
        configure_logging(level="INFO", json_output=False)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_configure_logging_applies_logger_overrides(self):
        configure_logging(level="INFO", logger_levels={"redisearch_schema.schema": "warning"})

        assert logging.getLogger("redisearch_schema.schema").level == logging.WARNING
        logging.getLogger("redisearch_schema.schema").setLevel(logging.NOTSET)

    def test_add_field_log_renders_field_details(self, capsys):
        configure_logging(level="INFO", logger_levels={"redisearch_schema.schema": "debug"})

        new_schema().add_field(new_tag_field("tags"))

        data = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert data["component"] == "schema"
        assert data["schema"] == {"field": "tags", "field_type": "tag", "position": 0, "sortable": False}
        logging.getLogger("redisearch_schema.schema").setLevel(logging.NOTSET)
