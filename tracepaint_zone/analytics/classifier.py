"""
Zone Classifier Module
======================

Stateless mapping of a point to a proximity zone around a target shape.

Design:
- Pure functions (no state)
- Physical threshold: distances are converted to millimeters with the
  injected ProximityConfig, so results hold across display densities
"""

import supervision as sv
from enum import Enum

from tracepaint_zone.config import ProximityConfig
from tracepaint_zone.geometry.shapes import Shape
from tracepaint_zone.geometry.spatial import point_in_shape, distance_to_outline


class Zone(str, Enum):
    """Where a point lies relative to the target outline."""
    INSIDE = "INSIDE"
    OUTSIDE_NEAR = "OUTSIDE_NEAR"
    OUTSIDE_FAR = "OUTSIDE_FAR"

    @property
    def is_outside(self) -> bool:
        return self is not Zone.INSIDE


class ZoneClassifier:
    """
    Stateless classifier for pointer samples.

    All methods are static; the proximity config is passed in explicitly.
    """

    @staticmethod
    def distance_mm(
        point: sv.Point,
        shape: Shape,
        config: ProximityConfig = ProximityConfig(),
    ) -> float:
        """Outline distance converted to millimeters."""
        return distance_to_outline(point, shape) / config.pixels_per_mm

    @staticmethod
    def classify(
        point: sv.Point,
        shape: Shape,
        config: ProximityConfig = ProximityConfig(),
    ) -> Zone:
        """
        Classify a point against a shape.

        Args:
            point: Canvas-space point
            shape: Target shape
            config: Pixel density and near threshold

        Returns:
            INSIDE if contained, OUTSIDE_NEAR if within the near threshold
            (inclusive), OUTSIDE_FAR otherwise
        """
        if point_in_shape(point, shape):
            return Zone.INSIDE

        if ZoneClassifier.distance_mm(point, shape, config) <= config.near_threshold_mm:
            return Zone.OUTSIDE_NEAR
        return Zone.OUTSIDE_FAR


def classify(
    point: sv.Point,
    shape: Shape,
    config: ProximityConfig = ProximityConfig(),
) -> Zone:
    """Module-level shortcut for ZoneClassifier.classify()."""
    return ZoneClassifier.classify(point, shape, config)
