"""
Analytics Layer
===============

Bounded Context: Zone classification, transition counting and coverage.

Responsibilities:
- Classify pointer samples into zones (stateless)
- Count zone transitions (state threaded as immutable values)
- Estimate painted coverage from a raster (stateless)
- Immutable statistics snapshots
"""

from tracepaint_zone.analytics.classifier import Zone, ZoneClassifier, classify
from tracepaint_zone.analytics.tracker import (
    ZoneTransitionState,
    ZoneTransitionTracker,
    track_transition,
    begin_stroke,
    reset_transitions,
)
from tracepaint_zone.analytics.coverage import compute_coverage, round_half_up
from tracepaint_zone.analytics.stats import SessionStats

__all__ = [
    "Zone",
    "ZoneClassifier",
    "classify",
    "ZoneTransitionState",
    "ZoneTransitionTracker",
    "track_transition",
    "begin_stroke",
    "reset_transitions",
    "compute_coverage",
    "round_half_up",
    "SessionStats",
]
