"""Tests for DEBUG records emitted by structural writes."""

import logging as _logging

import pytest as _pytest

import pathmap

LOGGER_NAME = "pathmap._core"


def _messages(caplog: _pytest.LogCaptureFixture) -> list[str]:
    """Return messages recorded by the core logger."""
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


@_pytest.fixture
def debug_caplog(caplog: _pytest.LogCaptureFixture) -> _pytest.LogCaptureFixture:
    """caplog capturing DEBUG from the core logger."""
    caplog.set_level(_logging.DEBUG, logger=LOGGER_NAME)
    return caplog


class TestWriteLogging:
    """Non-obvious structural events are logged at DEBUG."""

    def test_vivification_logged(self, debug_caplog: _pytest.LogCaptureFixture) -> None:
        """Each created intermediate level produces a record."""
        pathmap.PathMap.of({}).assoc_path("a.b.c", 1)

        messages = _messages(debug_caplog)
        assert len(messages) == 2
        assert "Creating intermediate level at ('a',)" in messages[0]
        assert "Creating intermediate level at ('a', 'b')" in messages[1]
        assert all(r.levelno == _logging.DEBUG for r in debug_caplog.records)

    def test_replaced_intermediate_logged(
        self, debug_caplog: _pytest.LogCaptureFixture
    ) -> None:
        """Replacing a scalar intermediate names its type and path."""
        pathmap.PathMap.of({"a": 1}).assoc_path("a.b", 2)

        messages = _messages(debug_caplog)
        assert len(messages) == 1
        assert "Replacing int value with a nested level at ('a',)" in messages[0]

    def test_existing_path_write_not_logged(
        self, debug_caplog: _pytest.LogCaptureFixture
    ) -> None:
        """Writing through existing levels is silent."""
        pathmap.PathMap.of({"a": {"b": 1}}).assoc_path("a.b", 2)

        assert _messages(debug_caplog) == []

    def test_missing_dissoc_path_logged(
        self, debug_caplog: _pytest.LogCaptureFixture
    ) -> None:
        """dissoc_path() on an absent path records the no-op."""
        pathmap.PathMap.of({"a": {}}).dissoc_path("a.b")

        messages = _messages(debug_caplog)
        assert len(messages) == 1
        assert "dissoc_path: ('a', 'b') not present" in messages[0]

    def test_missing_modify_path_logged(
        self, debug_caplog: _pytest.LogCaptureFixture
    ) -> None:
        """modify_path() on an absent path records the no-op."""
        pathmap.PathMap.of({}).modify_path(["x", "y"], lambda v: v)

        messages = _messages(debug_caplog)
        assert len(messages) == 1
        assert "modify_path: ('x', 'y') not present" in messages[0]

    def test_reads_not_logged(
        self,
        debug_caplog: _pytest.LogCaptureFixture,
        nested_map: pathmap.PathMap,
    ) -> None:
        """Reads never log, even for absent paths."""
        nested_map.has("missing")
        nested_map.has_path("model.missing.deeper")
        nested_map.path("missing.key")
        nested_map.path_eq("model.name", "llama")
        nested_map.path_or("missing", 1)
        nested_map.val()
        nested_map.keys()
        nested_map.values()

        assert _messages(debug_caplog) == []
