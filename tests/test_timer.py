import pytest

from nxdnkit.timer import Timer


def test_rejects_zero_ticks_per_sec():
    with pytest.raises(ValueError):
        Timer(0, 1)


def test_timeout_in_seconds():
    assert Timer(1000, 2).timeout == 2
    assert Timer(1000, 0, 1500).timeout == 1
    assert Timer(1000).timeout == 0


def test_not_running_until_started():
    timer = Timer(1000, 2)
    assert timer.is_running() is False
    assert timer.has_expired() is False
    timer.clock(5000)
    assert timer.has_expired() is False
    timer.start()
    assert timer.is_running() is True


def test_expires_after_timeout_ticks():
    timer = Timer(1000, 2)
    timer.start()
    timer.clock(1999)
    assert timer.has_expired() is False
    timer.clock(1)
    assert timer.has_expired() is True


def test_stop_clears_expiry():
    timer = Timer(1000, 0, 1500)
    timer.start()
    timer.clock(2000)
    assert timer.has_expired() is True
    timer.stop()
    assert timer.is_running() is False
    assert timer.has_expired() is False


def test_zero_timeout_never_starts():
    timer = Timer(1000)
    timer.start()
    assert timer.is_running() is False
    timer.clock(10)
    assert timer.has_expired() is False


def test_start_with_new_timeout():
    timer = Timer(1)
    timer.start(10)
    assert timer.is_running() is True
    assert timer.timeout == 10
    assert timer.remaining == 10


def test_remaining_and_timer_track_clock():
    timer = Timer(1, 10)
    timer.start()
    timer.clock(4)
    assert timer.timer == 4
    assert timer.remaining == 6
    timer.clock(6)
    assert timer.remaining == 0
    assert timer.has_expired() is True


def test_set_timeout_zero_stops_timer():
    timer = Timer(1000, 5)
    timer.start()
    timer.set_timeout(0)
    assert timer.is_running() is False
    assert timer.timeout == 0
    assert timer.timer == 0


def test_clock_default_is_one_tick():
    timer = Timer(1, 1)
    timer.start()
    timer.clock()
    assert timer.has_expired() is True