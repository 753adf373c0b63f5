#
# test_tracker.py: edge-triggered zone transition counting
#

from functools import reduce

from tracepaint_zone import (
    Zone,
    ZoneTransitionState,
    ZoneTransitionTracker,
    track_transition,
    begin_stroke,
    reset_transitions,
)

IN, NEAR, FAR = Zone.INSIDE, Zone.OUTSIDE_NEAR, Zone.OUTSIDE_FAR


def feed(zones, state=None):
    return reduce(track_transition, zones, state or reset_transitions())


def test_reference_sequence():
    state = feed([IN, NEAR, NEAR, FAR, IN])
    assert state.near_count == 1
    assert state.far_count == 1
    assert state.outline_crossings == 2
    assert state.last_zone is IN


def test_initial_state():
    state = reset_transitions()
    assert state == ZoneTransitionState(last_zone=None, outline_crossings=0, near_count=0, far_count=0)


def test_first_inside_sample_counts_nothing():
    state = feed([IN])
    assert (state.near_count, state.far_count, state.outline_crossings) == (0, 0, 0)


def test_first_outside_sample_is_an_entry_not_a_crossing():
    state = feed([NEAR])
    assert state.near_count == 1
    assert state.outline_crossings == 0


def test_repeated_zone_returns_same_state():
    state = feed([IN, NEAR])
    assert track_transition(state, NEAR) is state


def test_counts_independent_of_sampling_rate():
    sparse = feed([IN, NEAR, FAR, NEAR, IN, FAR])
    dense = feed([IN] * 5 + [NEAR] * 12 + [FAR] * 3 + [NEAR] + [IN] * 40 + [FAR] * 7)
    assert dense == sparse
    assert (sparse.near_count, sparse.far_count, sparse.outline_crossings) == (2, 2, 3)


def test_near_far_moves_are_not_crossings():
    state = feed([NEAR, FAR, NEAR, FAR])
    assert state.outline_crossings == 0
    assert state.near_count == 2
    assert state.far_count == 2


def test_input_state_untouched():
    start = feed([IN])
    after = track_transition(start, FAR)
    assert start.far_count == 0 and start.last_zone is IN
    assert after.far_count == 1 and after.outline_crossings == 1


def test_begin_stroke_keeps_counters():
    state = begin_stroke(feed([IN, NEAR]))
    assert state.last_zone is None
    assert state.near_count == 1
    assert state.outline_crossings == 1

    # Same zone after lifting the pointer counts as a new entry
    state = track_transition(state, NEAR)
    assert state.near_count == 2
    assert state.outline_crossings == 1


def test_outside_count_and_to_dict():
    state = feed([IN, NEAR, FAR])
    assert state.outside_count == 2
    assert state.to_dict() == {"last_zone": "OUTSIDE_FAR", "outline_crossings": 1, "near_count": 1, "far_count": 1}
    assert reset_transitions().to_dict()["last_zone"] is None


class TestZoneTransitionTracker:
    def test_update_reports_changes(self):
        tracker = ZoneTransitionTracker()
        assert tracker.update(IN) is True
        assert tracker.update(IN) is False
        assert tracker.update(FAR) is True
        assert tracker.state.far_count == 1

    def test_reset(self):
        tracker = ZoneTransitionTracker()
        for zone in [IN, NEAR, FAR, IN]:
            tracker.update(zone)
        tracker.reset()
        assert tracker.state == ZoneTransitionState()

    def test_state_can_be_threaded_explicitly(self):
        tracker = ZoneTransitionTracker()
        tracker.state = track_transition(tracker.state, NEAR)
        assert tracker.state.near_count == 1

    def test_begin_stroke(self):
        tracker = ZoneTransitionTracker(feed([NEAR]))
        tracker.begin_stroke()
        tracker.update(NEAR)
        assert tracker.state.near_count == 2

    def test_repr(self):
        tracker = ZoneTransitionTracker(feed([IN, NEAR, FAR, IN]))
        assert repr(tracker) == "ZoneTransitionTracker(near=1, far=1, crossings=2)"
