from moebot.timer import (
    TIMER_MARK_END,
    TIMER_MARK_START,
    TIMER_MARK_TOTAL,
    Timer,
    TimerMark,
    start_timer,
)


def _fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_start_timer_default_name():
    timer = start_timer()
    assert [m.name for m in timer.marks] == [TIMER_MARK_START]


def test_start_timer_named():
    timer = start_timer("first")
    assert [m.name for m in timer.marks] == ["first"]


def test_add_mark_appends_in_order():
    timer = start_timer()
    timer.add_mark("a")
    timer.add_mark("b")
    assert [m.name for m in timer.marks] == [TIMER_MARK_START, "a", "b"]
    assert timer.marks[0].mark <= timer.marks[1].mark <= timer.marks[2].mark


def test_stop_with_real_clock_segments_sum_to_total():
    timer = start_timer()
    timer.add_mark("work")
    times = timer.stop()
    assert set(times) == {TIMER_MARK_START, "work", TIMER_MARK_END, TIMER_MARK_TOTAL}
    assert times[TIMER_MARK_START] + times["work"] == times[TIMER_MARK_TOTAL]
    assert all(value >= 0 for value in times.values())


def test_stop_removes_total_mark_and_fills_durations():
    timer = Timer(marks=[TimerMark(name=TIMER_MARK_START, mark=0)], clock=_fake_clock([10, 25, 40]))
    timer.add_mark("a")
    times = timer.stop()
    assert [m.name for m in timer.marks] == [TIMER_MARK_START, "a", TIMER_MARK_END]
    assert times[TIMER_MARK_TOTAL] == 25
    assert times[TIMER_MARK_START] + times["a"] == times[TIMER_MARK_TOTAL]
    assert [m.duration for m in timer.marks] == [
        times[TIMER_MARK_START],
        times["a"],
        times[TIMER_MARK_END],
    ]


def test_timer_mark_to_dict_uses_short_keys():
    mark = TimerMark(name="x", duration=7)
    assert mark.to_dict() == {"d": 7, "n": "x"}