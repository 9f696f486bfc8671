import pytest

from bytegrab.cooldowns import CooldownTracker, format_remaining


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_no_cooldown_before_start(clock):
    tracker = CooldownTracker(clock)
    assert tracker.remaining_cooldown("g", 60) is None


def test_remaining_shrinks_then_clears(clock):
    tracker = CooldownTracker(clock)
    tracker.start_cooldown("g")
    assert tracker.remaining_cooldown("g", 60) == 60
    clock.now += 20
    assert tracker.remaining_cooldown("g", 60) == 40
    clock.now += 41
    assert tracker.remaining_cooldown("g", 60) is None


def test_keys_are_independent(clock):
    tracker = CooldownTracker(clock)
    tracker.start_cooldown("a")
    assert tracker.remaining_cooldown("b", 60) is None
    assert tracker.remaining_cooldown("a", 60) == 60


def test_restart_resets(clock):
    tracker = CooldownTracker(clock)
    tracker.start_cooldown("g")
    clock.now += 100
    tracker.start_cooldown("g")
    assert tracker.remaining_cooldown("g", 60) == 60


def test_none_key_never_cools_down(clock):
    tracker = CooldownTracker(clock)
    tracker.start_cooldown(None)
    assert tracker.remaining_cooldown(None, 60) is None


def test_format_seconds_only():
    assert format_remaining(42) == "Please wait **42 seconds**"


def test_format_one_minute():
    assert format_remaining(65) == "Please wait **1 minute and 5 seconds**"


def test_format_several_minutes():
    assert format_remaining(125) == "Please wait **2 minutes and 5 seconds**"


def test_format_truncates_fractions():
    assert format_remaining(59.9) == format_remaining(59)