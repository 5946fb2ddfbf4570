import pytest

from pomocli.pomodoro_api.session import (
    LONG_BREAK_SECONDS,
    SHORT_BREAK_SECONDS,
    WORK_SECONDS,
    Phase,
    PomodoroSession,
    break_phase_for,
    countdown,
    format_remaining,
)


def test_durations():
    assert WORK_SECONDS == 1500
    assert SHORT_BREAK_SECONDS == 300
    assert LONG_BREAK_SECONDS == 900
    assert Phase.WORK.seconds == WORK_SECONDS
    assert Phase.LONG_BREAK.value == "Long Break"


@pytest.mark.parametrize("seconds, expected", [
    (1500, "25:00"),
    (1499, "24:59"),
    (61, "01:01"),
    (9, "00:09"),
    (0, "00:00"),
])
def test_format_remaining(seconds, expected):
    assert format_remaining(seconds) == expected


class TestCountdown:
    def test_yields_each_second_until_deadline(self, fake_clock):
        ticks = list(countdown(5, fake_clock.now, fake_clock.sleep))
        assert ticks == [5, 4, 3, 2, 1]
        assert fake_clock.elapsed == 5

    def test_is_lazy(self, fake_clock):
        ticks = countdown(3, fake_clock.now, fake_clock.sleep)
        assert fake_clock.sleeps == []
        assert next(ticks) == 3
        assert fake_clock.sleeps == []

    def test_zero_duration_yields_nothing(self, fake_clock):
        assert list(countdown(0, fake_clock.now, fake_clock.sleep)) == []

    def test_rereads_clock_so_slow_sleeps_skip_ticks(self, fake_clock):
        def slow_sleep(seconds):
            fake_clock.sleep(seconds + 0.5)

        ticks = list(countdown(5, fake_clock.now, slow_sleep))
        assert ticks == sorted(ticks, reverse=True)
        assert len(ticks) < 5
        assert 5 <= fake_clock.elapsed <= 5.5

    def test_runs_until_deadline_when_reading_the_clock_takes_time(self, fake_clock):
        def slow_now():
            fake_clock.current += 0.001
            return fake_clock.current

        start = fake_clock.current
        ticks = list(countdown(5, slow_now, fake_clock.sleep))
        assert ticks == [5, 4, 3, 2, 1]
        assert fake_clock.current - start >= 5

    def test_first_tick_shows_full_duration(self):
        readings = iter([1000.0, 1000.4])
        ticks = countdown(1500, lambda: next(readings), lambda seconds: None)
        assert format_remaining(next(ticks)) == "25:00"

    def test_is_not_restartable(self, fake_clock):
        ticks = countdown(2, fake_clock.now, fake_clock.sleep)
        assert list(ticks) == [2, 1]
        assert list(ticks) == []


@pytest.mark.parametrize("pomodoros, expected", [
    (1, Phase.SHORT_BREAK),
    (2, Phase.SHORT_BREAK),
    (3, Phase.SHORT_BREAK),
    (4, Phase.LONG_BREAK),
    (5, Phase.SHORT_BREAK),
    (7, Phase.SHORT_BREAK),
    (8, Phase.LONG_BREAK),
    (12, Phase.LONG_BREAK),
])
def test_break_phase_for(pomodoros, expected):
    assert break_phase_for(pomodoros) is expected


class TestPomodoroSession:
    def _session(self, store, clock, events):
        return PomodoroSession(
            store,
            clock=clock.now,
            sleep=clock.sleep,
            on_tick=lambda phase, remaining: events.append(("tick", phase, remaining)),
            on_phase_end=lambda phase: events.append(("end", phase)),
        )

    def test_work_then_short_break(self, store, fake_clock):
        task_id = store.add("Draft proposal")
        events = []
        result = self._session(store, fake_clock, events).start(task_id)

        assert result.task.pomodoros == 1
        assert result.break_phase is Phase.SHORT_BREAK
        assert store.find(task_id).pomodoros == 1
        assert fake_clock.elapsed == WORK_SECONDS + SHORT_BREAK_SECONDS

        ends = [e[1] for e in events if e[0] == "end"]
        assert ends == [Phase.WORK, Phase.SHORT_BREAK]
        work_ticks = [e[2] for e in events if e[0] == "tick" and e[1] is Phase.WORK]
        assert work_ticks[0] == WORK_SECONDS
        assert work_ticks[-1] == 1
        assert len(work_ticks) == WORK_SECONDS

    def test_counter_is_persisted_before_break(self, store, data_file, fake_clock):
        task_id = store.add("a")
        seen = []

        def on_phase_end(phase):
            if phase is Phase.WORK:
                seen.append(data_file.read_text(encoding="utf-8"))

        PomodoroSession(store, clock=fake_clock.now, sleep=fake_clock.sleep, on_phase_end=on_phase_end).start(task_id)
        # the work phase ends before the counter is recorded; the break follows it
        assert '"pomodoros": 0' in seen[0]
        assert '"pomodoros": 1' in data_file.read_text(encoding="utf-8")

    def test_long_break_every_fourth_interval(self, store, fake_clock):
        task_id = store.add("a")
        session = PomodoroSession(store, clock=fake_clock.now, sleep=fake_clock.sleep)
        breaks = [session.start(task_id).break_phase for _ in range(8)]
        assert breaks == [
            Phase.SHORT_BREAK, Phase.SHORT_BREAK, Phase.SHORT_BREAK, Phase.LONG_BREAK,
            Phase.SHORT_BREAK, Phase.SHORT_BREAK, Phase.SHORT_BREAK, Phase.LONG_BREAK,
        ]
        assert store.find(task_id).pomodoros == 8

    def test_long_break_runs_900_seconds(self, store, fake_clock):
        task_id = store.add("a")
        for _ in range(3):
            store.record_pomodoro(task_id)
        session = PomodoroSession(store, clock=fake_clock.now, sleep=fake_clock.sleep)
        assert session.start(task_id).break_phase is Phase.LONG_BREAK
        assert fake_clock.elapsed == WORK_SECONDS + LONG_BREAK_SECONDS

    def test_missing_task_runs_no_timer(self, store, fake_clock):
        events = []
        assert self._session(store, fake_clock, events).start(99) is None
        assert events == []
        assert fake_clock.sleeps == []

    def test_task_deleted_during_work_skips_break(self, store, fake_clock):
        task_id = store.add("a")
        events = []

        def on_phase_end(phase):
            events.append(phase)
            if phase is Phase.WORK:
                store.delete(task_id)

        session = PomodoroSession(store, clock=fake_clock.now, sleep=fake_clock.sleep, on_phase_end=on_phase_end)
        assert session.start(task_id) is None
        assert events == [Phase.WORK]
        assert fake_clock.elapsed == WORK_SECONDS

    def test_completion_flag_is_independent(self, store, fake_clock):
        task_id = store.add("a")
        PomodoroSession(store, clock=fake_clock.now, sleep=fake_clock.sleep).start(task_id)
        assert store.find(task_id).completed is False
