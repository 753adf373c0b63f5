"""
Paint Session Module
====================

Bounded Context: One user painting one target shape at a time.

Design:
- Orchestrator: combines geometry, classification, transition tracking,
  stroke recording and coverage
- Event driven: pointer_down / pointer_move / pointer_up
- Coverage recomputed only at pointer_up
- Builder pattern: fluent configuration, validated at build time
- Persistence, timers and rendering stay with the caller; stats() hands
  back an immutable snapshot

Usage:
    session = (
        SessionBuilder()
        .with_catalog(catalog, shape_id="star")
        .with_canvas((350, 250))
        .build()
    )

    session.pointer_down(sv.Point(x=120, y=80))
    session.pointer_move(sv.Point(x=130, y=85))
    session.pointer_up()

    print(session.stats())
"""

import random
import supervision as sv
from typing import Optional, Tuple, Union

from tracepaint_zone.analytics.classifier import Zone, ZoneClassifier
from tracepaint_zone.analytics.coverage import compute_coverage
from tracepaint_zone.analytics.stats import SessionStats
from tracepaint_zone.analytics.tracker import ZoneTransitionState, ZoneTransitionTracker
from tracepaint_zone.catalog import ShapeCatalog, TargetShape
from tracepaint_zone.config import ExerciseConfig
from tracepaint_zone.geometry.scaler import canvas_scale_factors
from tracepaint_zone.geometry.shapes import Shape
from tracepaint_zone.logging import LogEvent, StructuredLogger, create_logger
from tracepaint_zone.raster.sources import PaintSource
from tracepaint_zone.raster.strokes import DEFAULT_BRUSH_COLOR, DEFAULT_BRUSH_SIZE, StrokeLayer


class PaintSession:
    """
    Tracks precision and coverage while a user paints a target shape.

    The target is given in reference canvas coordinates
    (config.canvas.reference_wh) and rescaled to the live canvas size.

    State:
        - zone transition counters (reset on shape change and reset())
        - recorded strokes (cleared on shape change and reset())
        - last coverage estimate
    """

    def __init__(
        self,
        target: TargetShape,
        canvas_wh: Optional[Tuple[int, int]] = None,
        config: Optional[ExerciseConfig] = None,
        brush_color: sv.Color = DEFAULT_BRUSH_COLOR,
        brush_size: int = DEFAULT_BRUSH_SIZE,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            target: Target shape authored for the reference canvas
            canvas_wh: Live canvas (width, height); defaults to the reference
            config: Exercise configuration
            brush_color: Color for recorded strokes
            brush_size: Brush diameter in pixels
            logger: Structured logger (default: "session" component)
        """
        self.config = config or ExerciseConfig()
        self.logger = logger or create_logger("session")
        self.brush_color = brush_color
        self.brush_size = brush_size

        self._canvas_wh = self._validate_canvas(canvas_wh or self.config.canvas.reference_wh)
        self._base_target = target
        self._target = self._fit(target)
        self._tracker = ZoneTransitionTracker()
        self._layer = StrokeLayer(*self._canvas_wh)
        self._coverage: Union[int, float] = 0
        self._drawing = False

        self.logger.info(
            event=LogEvent.SESSION_STARTED,
            message=f"Session started on '{target.shape_id}'",
            metadata={"shape_id": target.shape_id, "canvas_wh": list(self._canvas_wh)},
        )

    @staticmethod
    def _validate_canvas(canvas_wh: Tuple[int, int]) -> Tuple[int, int]:
        width, height = canvas_wh
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas_wh must have positive dimensions, got {canvas_wh}")
        return int(width), int(height)

    def _fit(self, target: TargetShape) -> TargetShape:
        scale_x, scale_y = canvas_scale_factors(self._canvas_wh, self.config.canvas.reference_wh)
        return target.scaled(scale_x, scale_y)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def target(self) -> TargetShape:
        """Target scaled to the live canvas."""
        return self._target

    @property
    def shape(self) -> Shape:
        return self._target.shape

    @property
    def canvas_wh(self) -> Tuple[int, int]:
        return self._canvas_wh

    @property
    def transitions(self) -> ZoneTransitionState:
        return self._tracker.state

    @property
    def coverage(self) -> Union[int, float]:
        return self._coverage

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    @property
    def stroke_layer(self) -> StrokeLayer:
        return self._layer

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def classify(self, point: sv.Point) -> Zone:
        """Zone of a point against the live target (no side effects)."""
        return ZoneClassifier.classify(point, self.shape, self.config.proximity)

    def pointer_down(self, point: sv.Point) -> Zone:
        """
        Start a stroke at `point`.

        The tracker forgets the previous stroke's last zone, so the first
        sample counts as an entry into its zone.
        """
        if self._drawing:
            self._layer.end_stroke()

        self._drawing = True
        self._tracker.begin_stroke()
        self._layer.begin_stroke(color=self.brush_color, size=self.brush_size)

        self.logger.debug(
            event=LogEvent.STROKE_STARTED,
            message="Stroke started",
            metadata={"shape_id": self._target.shape_id, "x": point.x, "y": point.y},
        )
        return self._sample(point)

    def pointer_move(self, point: sv.Point) -> Optional[Zone]:
        """
        Feed a move sample.

        Returns:
            Zone of the sample, or None when no stroke is in progress
        """
        if not self._drawing:
            return None
        return self._sample(point)

    def pointer_up(self, paint_source: Optional[PaintSource] = None) -> Union[int, float]:
        """
        Finish the stroke and refresh coverage.

        Args:
            paint_source: Raster to measure instead of the recorded strokes
                (e.g. the caller's composited canvas)

        Returns:
            Current coverage percentage
        """
        if not self._drawing and paint_source is None:
            return self._coverage

        if self._drawing:
            self._drawing = False
            stroke = self._layer.end_stroke()
            self.logger.debug(
                event=LogEvent.STROKE_FINISHED,
                message="Stroke finished",
                metadata={
                    "shape_id": self._target.shape_id,
                    "points": len(stroke.points) if stroke else 0,
                    "total_strokes": len(self._layer),
                },
            )

        return self.measure_coverage(self._layer if paint_source is None else paint_source)

    def _sample(self, point: sv.Point) -> Zone:
        zone = self.classify(point)
        previous = self._tracker.state.last_zone

        if self._tracker.update(zone):
            self.logger.debug(
                event=LogEvent.ZONE_TRANSITION,
                message=f"{previous.value if previous else 'unset'} -> {zone.value}",
                metadata={"shape_id": self._target.shape_id, **self._tracker.state.to_dict()},
            )

        # Only paint laid inside the outline is recorded
        if zone is Zone.INSIDE:
            self._layer.add_point(point)
        return zone

    # ------------------------------------------------------------------
    # Coverage
    # ------------------------------------------------------------------

    def measure_coverage(self, paint_source: PaintSource) -> Union[int, float]:
        """Estimate coverage from a raster sized like the live canvas."""
        width, height = self._canvas_wh
        self._coverage = compute_coverage(
            paint_source,
            self.shape,
            width=min(width, paint_source.width),
            height=min(height, paint_source.height),
            config=self.config.coverage,
        )
        self.logger.info(
            event=LogEvent.COVERAGE_COMPUTED,
            message=f"Coverage {self._coverage}%",
            metadata={"shape_id": self._target.shape_id, "coverage": self._coverage},
        )
        return self._coverage

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def change_shape(self, target: TargetShape) -> None:
        """Switch to a new target; strokes, counters and coverage are cleared."""
        previous = self._base_target.shape_id
        self._base_target = target
        self._target = self._fit(target)
        self._clear()
        self.logger.info(
            event=LogEvent.SHAPE_CHANGED,
            message=f"Shape changed: '{previous}' -> '{target.shape_id}'",
            metadata={"previous": previous, "shape_id": target.shape_id},
        )

    def resize(self, canvas_wh: Tuple[int, int]) -> None:
        """
        Follow a canvas size change.

        The target is rescaled from its reference definition (never from
        the previous live shape) and recorded strokes are rescaled along
        with it. Counters and coverage are kept.
        """
        canvas_wh = self._validate_canvas(canvas_wh)
        if canvas_wh == self._canvas_wh:
            return

        old_width, old_height = self._canvas_wh
        self._canvas_wh = canvas_wh
        self._target = self._fit(self._base_target)

        if self._drawing:
            self._layer.end_stroke()
            self._drawing = False
        self._layer = self._layer.rescaled(
            canvas_wh[0] / old_width,
            canvas_wh[1] / old_height,
            width=canvas_wh[0],
            height=canvas_wh[1],
        )

        self.logger.info(
            event=LogEvent.CANVAS_RESIZED,
            message=f"Canvas resized to {canvas_wh[0]}x{canvas_wh[1]}",
            metadata={"shape_id": self._target.shape_id, "canvas_wh": list(canvas_wh)},
        )

    def reset(self) -> None:
        """Clear strokes, counters and coverage; the target stays."""
        self._clear()
        self.logger.info(
            event=LogEvent.SESSION_RESET,
            message="Session reset",
            metadata={"shape_id": self._target.shape_id},
        )

    def _clear(self) -> None:
        self._drawing = False
        self._layer.clear()
        self._tracker.reset()
        self._coverage = 0

    def stats(self) -> SessionStats:
        """Immutable metrics snapshot."""
        state = self._tracker.state
        return SessionStats(
            shape_id=self._target.shape_id,
            near_count=state.near_count,
            far_count=state.far_count,
            outline_crossings=state.outline_crossings,
            coverage=self._coverage,
            total_strokes=len(self._layer),
        )

    def __repr__(self) -> str:
        return f"PaintSession({self.stats()})"


class SessionBuilder:
    """
    Builder for PaintSession.

    Usage:
        session = (
            SessionBuilder()
            .with_config(ExerciseConfig.from_yaml("config/exercise.yaml"))
            .with_catalog(catalog)          # random shape
            .with_canvas((700, 500))
            .with_brush(sv.Color.from_hex("#ff69b4"), 14)
            .build()
        )
    """

    def __init__(self):
        self._target: Optional[TargetShape] = None
        self._canvas_wh: Optional[Tuple[int, int]] = None
        self._config: Optional[ExerciseConfig] = None
        self._brush_color: sv.Color = DEFAULT_BRUSH_COLOR
        self._brush_size: int = DEFAULT_BRUSH_SIZE
        self._logger: Optional[StructuredLogger] = None

    def with_target(self, target: TargetShape) -> "SessionBuilder":
        """Set the target shape directly."""
        self._target = target
        return self

    def with_catalog(
        self,
        catalog: ShapeCatalog,
        shape_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> "SessionBuilder":
        """Pick the target from a catalog, by id or at random."""
        if shape_id is not None:
            self._target = catalog.get(shape_id)
        else:
            self._target = catalog.at(catalog.random_index(rng))
        return self

    def with_canvas(self, canvas_wh: Tuple[int, int]) -> "SessionBuilder":
        """Set the live canvas size."""
        self._canvas_wh = canvas_wh
        return self

    def with_config(self, config: ExerciseConfig) -> "SessionBuilder":
        self._config = config
        return self

    def with_brush(self, color: sv.Color, size: int = DEFAULT_BRUSH_SIZE) -> "SessionBuilder":
        self._brush_color = color
        self._brush_size = size
        return self

    def with_logger(self, logger: StructuredLogger) -> "SessionBuilder":
        self._logger = logger
        return self

    def build(self) -> PaintSession:
        """
        Build the session.

        Raises:
            ValueError: If no target was configured or the brush is invalid
        """
        if self._target is None:
            raise ValueError("Target shape is required (use .with_target() or .with_catalog())")
        if self._brush_size < 1:
            raise ValueError(f"Brush size must be >= 1, got {self._brush_size}")

        return PaintSession(
            target=self._target,
            canvas_wh=self._canvas_wh,
            config=self._config,
            brush_color=self._brush_color,
            brush_size=self._brush_size,
            logger=self._logger,
        )
