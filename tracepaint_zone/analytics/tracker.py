"""
Zone Transition Tracker Module
==============================

Edge-triggered counting of zone changes along a pointer path.

Design:
- State is an immutable value: track_transition() takes a state and
  returns the next one (functional style)
- Repeated samples in the same zone never change the counters, so counts
  do not depend on the pointer sampling rate
- ZoneTransitionTracker wraps one state value for callers that prefer an
  object, without hiding how the state evolves
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from tracepaint_zone.analytics.classifier import Zone


@dataclass(frozen=True)
class ZoneTransitionState:
    """
    Immutable transition counters for one drawing session.

    Attributes:
        last_zone: Zone of the previous sample, None before the first one
        outline_crossings: Times the pointer passed the outline (either way)
        near_count: Entries into the near band
        far_count: Entries into the far band
    """

    last_zone: Optional[Zone] = None
    outline_crossings: int = 0
    near_count: int = 0
    far_count: int = 0

    @property
    def outside_count(self) -> int:
        """Entries into any outside band."""
        return self.near_count + self.far_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_zone": self.last_zone.value if self.last_zone is not None else None,
            "outline_crossings": self.outline_crossings,
            "near_count": self.near_count,
            "far_count": self.far_count,
        }


def track_transition(state: ZoneTransitionState, zone: Zone) -> ZoneTransitionState:
    """
    Feed one classified sample.

    Args:
        state: Current counters
        zone: Zone of the new sample

    Returns:
        Next state (the same object when the zone did not change)
    """
    previous = state.last_zone
    if zone == previous:
        return state

    near_count = state.near_count
    far_count = state.far_count
    crossings = state.outline_crossings

    if zone is Zone.OUTSIDE_NEAR:
        near_count += 1
    elif zone is Zone.OUTSIDE_FAR:
        far_count += 1

    # Outline passed: inside -> outside or outside -> inside
    if previous is not None and (previous is Zone.INSIDE) != (zone is Zone.INSIDE):
        crossings += 1

    return ZoneTransitionState(
        last_zone=zone,
        outline_crossings=crossings,
        near_count=near_count,
        far_count=far_count,
    )


def begin_stroke(state: ZoneTransitionState) -> ZoneTransitionState:
    """Forget the last zone but keep the counters (pointer lifted and put down)."""
    return replace(state, last_zone=None)


def reset_transitions() -> ZoneTransitionState:
    """Fresh state for a new session or a new target shape."""
    return ZoneTransitionState()


class ZoneTransitionTracker:
    """
    Holds the transition state of the active session.

    Usage:
        tracker = ZoneTransitionTracker()

        # Each pointer sample
        tracker.update(ZoneClassifier.classify(point, shape, config))

        # Or thread the state explicitly
        tracker.state = track_transition(tracker.state, zone)
    """

    def __init__(self, state: Optional[ZoneTransitionState] = None):
        self._state = state if state is not None else reset_transitions()

    @property
    def state(self) -> ZoneTransitionState:
        """Current transition state (immutable snapshot)."""
        return self._state

    @state.setter
    def state(self, new_state: ZoneTransitionState) -> None:
        self._state = new_state

    def update(self, zone: Zone) -> bool:
        """
        Feed one sample.

        Returns:
            True if the zone changed
        """
        previous = self._state
        self._state = track_transition(previous, zone)
        return self._state is not previous

    def begin_stroke(self) -> None:
        """Unset the last zone at the start of a new stroke."""
        self._state = begin_stroke(self._state)

    def reset(self) -> None:
        """Clear all counters."""
        self._state = reset_transitions()

    def __repr__(self) -> str:
        s = self._state
        return (
            f"ZoneTransitionTracker(near={s.near_count}, far={s.far_count}, "
            f"crossings={s.outline_crossings})"
        )
