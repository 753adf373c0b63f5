"""
Configuration schema for the paint exercise core.

Display density, proximity threshold, coverage sampling and the reference
canvas the shape catalog is authored for. Every value is passed explicitly
to the classifier and estimator; there are no process-wide settings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple
import yaml


# 96 dots-per-inch / 25.4 mm
DEFAULT_PIXELS_PER_MM = 3.78
DEFAULT_NEAR_THRESHOLD_MM = 10.0
DEFAULT_COVERAGE_STRIDE = 2
DEFAULT_WHITE_TOLERANCE = 245
DEFAULT_REFERENCE_WH = (700, 500)


@dataclass(frozen=True)
class ProximityConfig:
    """Conversion from pixels to millimeters and the near/far boundary."""

    pixels_per_mm: float = DEFAULT_PIXELS_PER_MM
    near_threshold_mm: float = DEFAULT_NEAR_THRESHOLD_MM

    def __post_init__(self):
        """Validate proximity configuration."""
        if self.pixels_per_mm <= 0:
            raise ValueError(
                f"pixels_per_mm must be > 0, got {self.pixels_per_mm}"
            )

        if self.near_threshold_mm < 0:
            raise ValueError(
                f"near_threshold_mm must be >= 0, got {self.near_threshold_mm}"
            )

    @classmethod
    def from_dpi(cls, dpi: float, near_threshold_mm: float = DEFAULT_NEAR_THRESHOLD_MM) -> "ProximityConfig":
        """Build from a display density in dots per inch."""
        return cls(pixels_per_mm=dpi / 25.4, near_threshold_mm=near_threshold_mm)


@dataclass(frozen=True)
class CoverageConfig:
    """
    Coverage sampling settings.

    stride: sample every Nth pixel along each axis
    white_tolerance: channel value above which a composited pixel counts as
        background white
    decimals: 0 for an integer percentage, 1 for one decimal place
    """

    stride: int = DEFAULT_COVERAGE_STRIDE
    white_tolerance: int = DEFAULT_WHITE_TOLERANCE
    decimals: int = 0

    def __post_init__(self):
        """Validate coverage configuration."""
        if self.stride < 1:
            raise ValueError(f"stride must be >= 1, got {self.stride}")

        if not 0 <= self.white_tolerance <= 255:
            raise ValueError(
                f"white_tolerance must be in [0, 255], got {self.white_tolerance}"
            )

        if self.decimals not in {0, 1}:
            raise ValueError(f"decimals must be 0 or 1, got {self.decimals}")


@dataclass(frozen=True)
class CanvasConfig:
    """Canvas size the shape catalog coordinates are authored for."""

    reference_wh: Tuple[int, int] = DEFAULT_REFERENCE_WH  # (width, height)

    def __post_init__(self):
        """Validate canvas configuration."""
        width, height = self.reference_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"reference_wh must have positive dimensions, got {self.reference_wh}"
            )


@dataclass(frozen=True)
class ExerciseConfig:
    """
    Main configuration for a paint exercise.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    proximity: ProximityConfig = field(default_factory=ProximityConfig)
    coverage: CoverageConfig = field(default_factory=CoverageConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    catalog_path: Optional[Path] = None

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ExerciseConfig":
        """
        Load configuration from YAML file.

        Missing sections fall back to defaults. A relative catalog_path is
        resolved against the YAML file's directory.

        Example YAML:
            proximity:
              pixels_per_mm: 3.78
              near_threshold_mm: 10

            coverage:
              stride: 2
              white_tolerance: 245
              decimals: 0

            canvas:
              reference_wh: [700, 500]  # [width, height]

            catalog_path: "shapes.yaml"

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or values fail validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping in {yaml_path}")

        try:
            proximity = ProximityConfig(**data.get("proximity", {}))
            coverage = CoverageConfig(**data.get("coverage", {}))

            canvas_data = dict(data.get("canvas", {}))
            if "reference_wh" in canvas_data:
                canvas_data["reference_wh"] = tuple(canvas_data["reference_wh"])
            canvas = CanvasConfig(**canvas_data)
        except TypeError as e:
            raise ValueError(f"Unknown config key in {yaml_path}: {e}")

        catalog_path = data.get("catalog_path")
        if catalog_path is not None:
            catalog_path = Path(catalog_path)
            if not catalog_path.is_absolute():
                catalog_path = path.parent / catalog_path

        return cls(
            proximity=proximity,
            coverage=coverage,
            canvas=canvas,
            catalog_path=catalog_path,
        )
