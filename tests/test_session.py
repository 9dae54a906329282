"""Tests for the attempt session controller and its notifications."""

from splitrun import events
from splitrun.actions import Clear, NewRun, Pop, Push
from splitrun.aggregate import ATTEMPT_CUMULATIVE, ATTEMPT_SPLIT, COMPARISON_CUMULATIVE, Pair, Source
from splitrun.comparison import Comparison, FixedProvider, NullProvider
from splitrun.models import AttemptInfo, Status, Time
from splitrun.pace import Pace, PacedTime, SplitInRun
from splitrun.session import Session

from conftest import FIXED_DATE, RecordingObserver


def baseline() -> Comparison:
    return Comparison(
        splits={
            "pp1": Pair(split=Time.parse("1:20"), cumulative=Time.parse("00:01:20.000")),
            "pp2": Pair(split=Time.parse("1:00"), cumulative=Time.parse("2:20")),
        },
        total=Time.parse("2:20"),
    )


class CountingProvider:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def comparison(self):
        self.calls += 1
        return self.results.pop(0) if self.results else None


class TestPush:
    def test_event_sequence(self, session, recorder):
        session.perform(Push(locator="pp1", time=Time.parse("1:30")))

        evts = recorder.events
        assert len(evts) == 8
        assert evts[0] == events.Split(short="pp1", event=events.TimePushed(time=Time.parse("1:30")))
        assert [e.short for e in evts[1:7]] == ["pp1"] * 3 + ["pp2"] * 3
        assert isinstance(evts[1].event, events.PaceUpdated)
        assert evts[2].event == events.AggregateUpdated(kind=ATTEMPT_SPLIT, time=Time.parse("1:30"))
        assert evts[3].event == events.AggregateUpdated(
            kind=ATTEMPT_CUMULATIVE, time=Time.parse("1:30")
        )
        assert evts[5].event == events.AggregateUpdated(kind=ATTEMPT_SPLIT, time=None)
        assert evts[7] == events.Total(
            paced=PacedTime(pace=Pace.INCONCLUSIVE, time=Time.parse("1:30")),
            source=Source.ATTEMPT,
        )

    def test_completed_scenario(self, session):
        session.perform(Push(locator=0, time=Time.parse("00:01:30.000")))
        session.perform(Push(locator=1, time=Time.parse("00:00:45.000")))

        sweep = session.recompute()
        assert sweep.summary_for("pp2").aggregates.attempt.cumulative == Time.parse("00:02:15.000")
        assert session.status() is Status.COMPLETED

    def test_unknown_locator_is_silent_noop(self, session, recorder):
        session.perform(Push(locator="nope", time=Time.parse("1:00")))
        session.perform(Push(locator=7, time=Time.parse("1:00")))
        session.perform(Pop(locator="nope"))
        session.perform(Clear(locator=-1))

        assert recorder.events == []
        assert session.status() is Status.NOT_STARTED


class TestPop:
    def test_pop_restores_aggregates(self, session):
        session.perform(Push(locator="pp1", time=Time.parse("1:30")))
        before = session.recompute()

        session.perform(Push(locator="pp1", time=Time.parse("0:12.345")))
        session.perform(Pop(locator="pp1"))

        assert session.recompute() == before

    def test_pop_scenario(self, session):
        session.set_comparison_provider(FixedProvider(baseline()))
        session.perform(Push(locator=0, time=Time.parse("1:30")))
        session.perform(Push(locator=1, time=Time.parse("0:45")))

        session.perform(Pop(locator=1))

        assert session.run.get(1).num_times() == 0
        assert session.recompute().summary_for("pp2").pace == SplitInRun.inconclusive()
        assert session.status() is Status.IN_PROGRESS

    def test_pop_event_sequence(self, session, recorder):
        session.perform(Push(locator="pp2", time=Time.parse("0:45")))
        recorder.clear()

        session.perform(Pop(locator="pp2"))

        assert recorder.events[0] == events.Split(
            short="pp2", event=events.TimePopped(time=Time.parse("0:45"))
        )
        assert recorder.events[-1] == events.Total(paced=PacedTime(), source=Source.ATTEMPT)
        assert len(recorder.events) == 8

    def test_pop_empty_emits_nothing(self, session, recorder):
        session.perform(Pop(locator="pp1"))
        assert recorder.events == []


class TestClear:
    def test_clear_emits_cleared_and_sweep(self, session, recorder):
        session.perform(Push(locator="pp1", time=Time.parse("1:00")))
        session.perform(Push(locator="pp1", time=Time.parse("0:30")))
        recorder.clear()

        session.perform(Clear(locator="pp1"))

        assert recorder.events[0] == events.Split(short="pp1", event=events.TimesCleared(count=2))
        assert recorder.events[-1] == events.Total(paced=PacedTime(), source=Source.ATTEMPT)
        assert session.run.get("pp1").num_times() == 0

    def test_clear_twice_equals_clear_once(self, session, recorder):
        session.perform(Push(locator="pp1", time=Time.parse("1:00")))
        session.perform(Clear(locator="pp1"))
        after_one = session.recompute()
        recorder.clear()

        session.perform(Clear(locator="pp1"))

        assert recorder.events == []
        assert session.recompute() == after_one


class TestNewRun:
    def test_reset_semantics(self, session):
        session.perform(Push(locator=0, time=Time.parse("1:30")))
        before = session.run.attempt_number

        session.perform(NewRun())

        assert all(split.num_times() == 0 for split in session.run)
        assert session.run.attempt_number == before + 1
        assert session.run_as_historic() is None

    def test_reset_event_carries_outgoing_record(self, session, recorder, short_descriptor):
        session.perform(Push(locator=0, time=Time.parse("1:30")))
        session.perform(Push(locator=1, time=Time.parse("0:45")))
        recorder.clear()

        session.perform(NewRun())

        reset = recorder.events[0]
        assert isinstance(reset, events.Reset)
        assert reset.record.was_completed
        assert reset.record.date == FIXED_DATE
        assert reset.record.category_locator == short_descriptor
        assert reset.record.total() == Time.parse("2:15")

        assert recorder.events[1] == events.Attempt(info=AttemptInfo(total=1, completed=1))
        assert recorder.events[2] == events.Total(paced=PacedTime(), source=Source.COMPARISON)

    def test_reset_of_unstarted_run_carries_none(self, session, recorder):
        session.perform(NewRun())
        assert recorder.events[0] == events.Reset(record=None)

    def test_reset_repulls_comparison(self, metadata, run):
        provider = CountingProvider(None, baseline(), None)
        session = Session(metadata, run, provider=provider)
        assert provider.calls == 1
        assert session.comparison.is_null()

        recorder = RecordingObserver()
        session.observers.attach(recorder)
        session.perform(NewRun())

        assert provider.calls == 2
        assert session.comparison == baseline()
        comparison_events = [
            e for e in recorder.split_events() if isinstance(e, events.AggregateUpdated)
        ]
        assert events.AggregateUpdated(
            kind=COMPARISON_CUMULATIVE, time=Time.parse("2:20")
        ) in comparison_events

        session.perform(NewRun())
        assert provider.calls == 3
        assert session.comparison == baseline(), "None keeps the previous comparison"

    def test_push_and_pop_do_not_pull(self, metadata, run):
        provider = CountingProvider(baseline())
        session = Session(metadata, run, provider=provider)

        session.perform(Push(locator=0, time=Time.parse("1:30")))
        session.perform(Pop(locator=0))

        assert provider.calls == 1


class TestComparison:
    def test_behind_scenario(self, session, recorder):
        session.set_comparison_provider(FixedProvider(baseline()))
        recorder.clear()

        session.perform(Push(locator="pp1", time=Time.parse("00:01:30.000")))

        paces = [e.pace for e in recorder.split_events("pp1") if isinstance(e, events.PaceUpdated)]
        assert paces == [SplitInRun(pace=Pace.BEHIND, delta=Time.parse("10"))]
        assert recorder.events[-1].paced.pace is Pace.BEHIND

    def test_set_provider_emits_comparison(self, session, recorder):
        session.set_comparison_provider(FixedProvider(baseline()))

        assert recorder.events[0] == events.Total(
            paced=PacedTime.inconclusive(Time.parse("2:20")), source=Source.COMPARISON
        )
        assert len(recorder.of_type(events.Split)) == 4

    def test_null_provider_keeps_null_comparison(self, session):
        session.set_comparison_provider(NullProvider())
        assert session.comparison.is_null()


class TestDump:
    def test_dump_order(self, session, recorder, metadata):
        session.dump_to_observers()

        assert recorder.events == [
            events.GameCategory(info=metadata),
            events.AddSplit(short="pp1", name="Palmtree Panic 1"),
            events.AddSplit(short="pp2", name="Palmtree Panic 2"),
            events.Attempt(info=AttemptInfo()),
            events.Total(paced=PacedTime(), source=Source.COMPARISON),
        ]

    def test_attach_replays_to_new_observer_only(self, session, recorder):
        session.perform(Push(locator="pp1", time=Time.parse("1:30")))
        recorder.clear()

        late = RecordingObserver()
        session.attach(late)

        assert recorder.events == []
        assert isinstance(late.events[0], events.GameCategory)
        pushed = [e for e in late.split_events("pp1") if isinstance(e, events.TimePushed)]
        assert pushed == [events.TimePushed(time=Time.parse("1:30"))]
        assert late.events[-1] == events.Total(
            paced=PacedTime(time=Time.parse("1:30")), source=Source.ATTEMPT
        )

        session.perform(Pop(locator="pp1"))
        assert late.events[-1] == recorder.events[-1]


class TestQueries:
    def test_num_splits_and_position_of(self, session):
        assert session.num_splits() == 2
        assert session.position_of("pp2") == 1
        assert session.position_of("zz") is None

    def test_run_as_historic_incomplete(self, session):
        session.perform(Push(locator="pp2", time=Time.parse("0:45")))
        record = session.run_as_historic()
        assert record is not None
        assert not record.was_completed

    def test_events_serialize_with_type(self, session, recorder):
        session.perform(Push(locator="pp1", time=Time.parse("1:30")))
        message = recorder.events[0].model_dump(mode="json")
        assert message == {
            "type": "split",
            "short": "pp1",
            "event": {"type": "time_pushed", "time": {"millis": 90_000}},
        }
