"""Tests for the split, run and short map models."""

import random

import pytest

from splitrun.errors import DuplicateShortError
from splitrun.models import AttemptInfo, Run, ShortMap, Split, Status, Time

from conftest import FIXED_DATE


class TestSplit:
    def test_push_pop_is_a_stack(self):
        split = Split.new("pp1", "Palmtree Panic 1")
        split.push(Time.parse("10"))
        split.push(Time.parse("20"))

        assert split.num_times() == 2
        assert split.pop() == Time.parse("20")
        assert split.pop() == Time.parse("10")
        assert split.num_times() == 0

    def test_pop_empty_is_noop(self):
        split = Split.new("pp1", "Palmtree Panic 1")
        assert split.pop() is None
        assert split.num_times() == 0

    def test_total(self):
        split = Split.new("pp1", "Palmtree Panic 1")
        assert split.total().is_zero()
        split.push(Time.parse("1:00"))
        split.push(Time.parse("0:30.5"))
        assert split.total() == Time.parse("1:30.5")

    def test_clear_returns_count_and_is_idempotent(self):
        split = Split.new("pp1", "Palmtree Panic 1")
        split.push(Time.parse("10"))
        split.push(Time.parse("20"))

        assert split.clear() == 2
        assert split.clear() == 0
        assert split.num_times() == 0

    def test_num_times_matches_push_pop_count(self):
        """num_times is pushes minus matched pops, never below zero"""
        rng = random.Random(1234)
        split = Split.new("pp1", "Palmtree Panic 1")
        expected = 0

        for _ in range(200):
            if rng.random() < 0.5:
                split.push(Time(millis=rng.randrange(100_000)))
                expected += 1
            else:
                before = split.num_times()
                popped = split.pop()
                if before == 0:
                    assert popped is None
                    assert split.num_times() == 0
                else:
                    expected -= 1
            assert split.num_times() == expected


class TestShortMap:
    def test_both_directions(self):
        short_map = ShortMap()
        short_map.insert("pp1", 0)
        short_map.insert("pp2", 1)

        assert short_map.index_of("pp2") == 1
        assert short_map.short_at(0) == "pp1"
        assert short_map.index_of("sp1") is None
        assert "pp1" in short_map
        assert len(short_map) == 2

    def test_rejects_duplicate_short(self):
        short_map = ShortMap()
        short_map.insert("pp1", 0)
        with pytest.raises(DuplicateShortError):
            short_map.insert("pp1", 1)

    def test_rejects_duplicate_index(self):
        short_map = ShortMap()
        short_map.insert("pp1", 0)
        with pytest.raises(DuplicateShortError):
            short_map.insert("pp2", 0)
        assert "pp2" not in short_map


class TestRun:
    def test_rejects_duplicate_short_ids(self):
        with pytest.raises(DuplicateShortError):
            Run([Split.new("pp1", "A"), Split.new("pp1", "B")])

    def test_position_of(self, run):
        assert run.position_of("pp1") == 0
        assert run.position_of("pp2") == 1
        assert run.position_of(1) == 1
        assert run.position_of(2) is None
        assert run.position_of(-1) is None
        assert run.position_of("nope") is None

    def test_status_is_derived(self, run):
        assert run.status() is Status.NOT_STARTED
        run.get("pp1").push(Time.parse("1:30"))
        assert run.status() is Status.IN_PROGRESS
        run.get(1).push(Time.parse("0:45"))
        assert run.status() is Status.COMPLETED

    def test_reset_clears_times_and_increments_attempt(self, run):
        run.get(0).push(Time.parse("1:30"))
        run.get(1).push(Time.parse("0:45"))

        run.reset()

        assert all(split.num_times() == 0 for split in run)
        assert run.attempt == AttemptInfo(total=1, completed=1)
        assert [split.info.name for split in run] == ["Palmtree Panic 1", "Palmtree Panic 2"]

        run.reset()
        assert run.attempt == AttemptInfo(total=2, completed=1)

    def test_historic_record(self, run, short_descriptor):
        run.get(0).push(Time.parse("1:00"))
        run.get(0).push(Time.parse("0:30"))

        record = run.as_historic_record(short_descriptor, False, FIXED_DATE)

        assert record.category_locator == short_descriptor
        assert not record.was_completed
        assert record.date == FIXED_DATE
        assert [s.info.short for s in record.timing] == ["pp1", "pp2"]
        assert record.timing[0].times == [Time.parse("1:00"), Time.parse("0:30")]
        assert record.timing[1].times == []
        assert record.total() == Time.parse("1:30")

    def test_historic_record_is_a_snapshot(self, run, short_descriptor):
        run.get(0).push(Time.parse("1:00"))
        record = run.as_historic_record(short_descriptor, False, FIXED_DATE)
        run.reset()
        assert record.timing[0].times == [Time.parse("1:00")]
