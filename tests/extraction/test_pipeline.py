"""Unit tests for snapshot file loading and parser dispatch."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

import pytest

from tablesnap.extraction.pipeline import PARSERS, load_snapshot, run


class TestLoadSnapshot:

    def test_loads_camel_case_file(self, tmp_path, work_queue_payload):
        path = tmp_path / "queue.json"
        path.write_text(json.dumps(work_queue_payload, ensure_ascii=False), encoding="utf-8")
        snapshot = load_snapshot(path)
        assert len(snapshot.rows) == 4
        assert snapshot.rows[0].cells[0].raw_text == "Task ▲"

    def test_loads_snake_case_file(self, tmp_path):
        path = tmp_path / "kv.json"
        payload = {"rows": [{"cells": [{"raw_text": "Status"}, {"raw_text": "Open"}]}]}
        path.write_text(json.dumps(payload), encoding="utf-8")
        assert run(load_snapshot(str(path)), "key-value") == {"Status": "Open"}


class TestRun:

    def test_modes_registered(self):
        assert set(PARSERS) == {"key-value", "data", "work-allocation"}

    def test_work_allocation_mode(self, work_queue_snapshot):
        assert run(work_queue_snapshot, "work-allocation") == [
            {"Task": "Review hearing bundle", "Case reference": "1234-5678", "Assignee": "Alice"}
        ]

    def test_data_mode(self, work_queue_snapshot):
        assert len(run(work_queue_snapshot, "data")) == 2

    def test_unknown_mode(self, work_queue_snapshot):
        with pytest.raises(ValueError, match="Unknown mode"):
            run(work_queue_snapshot, "pivot")
