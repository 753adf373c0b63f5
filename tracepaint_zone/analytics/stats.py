"""
Session Statistics Module
=========================

Immutable snapshot of a paint session's metrics.

Design:
- Frozen dataclass (value object, no identity)
- Serializable to a JSON-ready dict for whatever persists it
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class SessionStats:
    """
    Metrics of one shape within a session.

    Attributes:
        shape_id: Target shape identifier (None for an anonymous shape)
        near_count: Entries into the near band (<= threshold)
        far_count: Entries into the far band (> threshold)
        outline_crossings: Times the outline was passed
        coverage: Painted percentage of the interior
        total_strokes: Committed strokes
    """

    shape_id: Optional[str] = None
    near_count: int = 0
    far_count: int = 0
    outline_crossings: int = 0
    coverage: Union[int, float] = 0
    total_strokes: int = 0

    @property
    def outside_count(self) -> int:
        return self.near_count + self.far_count

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"{self.shape_id or 'shape'}: coverage={self.coverage}%, "
            f"near={self.near_count}, far={self.far_count}, "
            f"crossings={self.outline_crossings}"
        )
