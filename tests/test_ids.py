"""Tests for task id generators."""

import pytest

from taskdeck.utils import SequentialIdFactory, new_task_id


class TestNewTaskId:
    def test_unique(self):
        ids = {new_task_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_hex(self):
        value = new_task_id()
        assert len(value) == 32
        int(value, 16)


class TestSequentialIdFactory:
    def test_counts_from_one(self):
        factory = SequentialIdFactory()
        assert [factory(), factory(), factory()] == ["1", "2", "3"]

    def test_after_existing(self):
        factory = SequentialIdFactory.after(["1", "8", "3"])
        assert factory() == "9"

    def test_after_ignores_non_numeric(self):
        factory = SequentialIdFactory.after(["abc", "4", "f00d"])
        assert factory() == "5"

    def test_after_ignores_non_ascii_digits(self):
        """Superscripts pass str.isdigit but are not integers."""
        factory = SequentialIdFactory.after(["²", "3"])
        assert factory() == "4"

    def test_after_empty(self):
        assert SequentialIdFactory.after([])() == "1"

    def test_invalid_start(self):
        with pytest.raises(ValueError):
            SequentialIdFactory(0)
