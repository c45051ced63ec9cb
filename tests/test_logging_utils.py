"""
Tests for the structured log line format.
"""

import logging

from recipe_studio.logging_utils import RUN_ID, StructuredFormatter


def _record(**extra):
    record = logging.LogRecord(
        name="recipe_studio.generator.matcher",
        level=logging.INFO,
        pathname="/src/recipe_studio/generator/matcher.py",
        lineno=42,
        msg="Selected %s",
        args=("fried_rice",),
        exc_info=None,
        func="generate",
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_fields_in_order(self):
        line = StructuredFormatter().format(
            _record(invoking_func="generate", next_step="Customize", resolution="")
        )
        parts = line.split("|")
        assert parts[0] == RUN_ID
        assert parts[3] == "INFO"
        assert parts[4] == "matcher.py:42"
        assert parts[5] == "matcher.generate"
        assert parts[6] == StructuredFormatter.MODULE_PURPOSES["matcher"]
        assert parts[7] == "generate"
        assert parts[9] == "Selected fried_rice"
        assert parts[10] == "Customize"
        assert line.endswith("|<END>")

    def test_module_purpose_override(self):
        line = StructuredFormatter().format(_record(module_purpose="CLI demo"))
        assert line.split("|")[6] == "CLI demo"

    def test_missing_extras_are_blank(self):
        parts = StructuredFormatter().format(_record()).split("|")
        assert parts[7] == ""
        assert parts[8] == ""
