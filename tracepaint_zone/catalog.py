"""
Shape Catalog Module
====================

Bounded Context: Target shapes offered by the exercise.

Design:
- TargetShape: immutable (id, name, geometry) record
- ShapeCatalog: ordered, id-indexed, read-only collection
- Loaded from JSON or YAML (JSON parses as YAML)
- Fail fast: every record validated at load time

Record layout:
    - id: "square"
      name: "Square"
      type: "rect"
      x: 200
      y: 100
      width: 300
      height: 300
"""

import random
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from tracepaint_zone.geometry.shapes import Shape, ShapeType, ShapeValidationError, shape_from_dict
from tracepaint_zone.geometry.scaler import scale_shape
from tracepaint_zone.logging import LogEvent, create_logger


logger = create_logger("catalog")


class CatalogError(ValueError):
    """Raised when a catalog cannot be loaded or queried."""


@dataclass(frozen=True)
class TargetShape:
    """
    Immutable catalog entry.

    Attributes:
        shape_id: Unique identifier
        name: Display name
        shape: Geometry
    """

    shape_id: str
    name: str
    shape: Shape

    def __post_init__(self):
        if not self.shape_id:
            raise ShapeValidationError("shape id cannot be empty")

    @property
    def shape_type(self) -> ShapeType:
        return self.shape.shape_type

    def scaled(self, scale_x: float, scale_y: float) -> "TargetShape":
        """Same id and name, geometry scaled per axis."""
        return TargetShape(
            shape_id=self.shape_id,
            name=self.name,
            shape=scale_shape(self.shape, scale_x, scale_y),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.shape_id, "name": self.name, **self.shape.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TargetShape":
        """
        Deserialize a catalog record.

        Raises:
            ShapeValidationError: If id is missing or the geometry is invalid
        """
        if not isinstance(data, dict):
            raise ShapeValidationError(f"Catalog record must be a mapping, got {type(data).__name__}")
        if "id" not in data:
            raise ShapeValidationError("Missing required catalog field: 'id'")
        shape_id = str(data["id"])
        return cls(
            shape_id=shape_id,
            name=str(data.get("name", shape_id)),
            shape=shape_from_dict(data),
        )


class ShapeCatalog:
    """
    Ordered collection of target shapes.

    Usage:
        catalog = ShapeCatalog.from_file("config/shapes.yaml")
        target = catalog.get("star")
        following = catalog.at(catalog.next_index(catalog.index_of("star")))
    """

    def __init__(self, targets: List[TargetShape]):
        self._targets: Tuple[TargetShape, ...] = tuple(targets)
        self._index: Dict[str, int] = {}
        for idx, target in enumerate(self._targets):
            if target.shape_id in self._index:
                raise CatalogError(f"Duplicate shape id: {target.shape_id!r}")
            self._index[target.shape_id] = idx

    @classmethod
    def from_list(cls, records: List[Dict[str, Any]]) -> "ShapeCatalog":
        """
        Build from raw catalog records.

        Raises:
            ShapeValidationError: If a record is invalid (message names the
                offending index)
            CatalogError: On duplicate ids
        """
        targets = []
        for idx, record in enumerate(records):
            try:
                targets.append(TargetShape.from_dict(record))
            except ShapeValidationError as e:
                raise ShapeValidationError(f"Catalog record {idx}: {e}") from e
        return cls(targets)

    @classmethod
    def from_file(cls, path: Path) -> "ShapeCatalog":
        """
        Load a catalog from a JSON or YAML file.

        The root is either a list of records or a mapping with a
        ``shapes`` list.

        Raises:
            CatalogError: Missing file, invalid syntax, wrong layout
            ShapeValidationError: Invalid record
        """
        path = Path(path)
        try:
            if not path.exists():
                raise CatalogError(f"Catalog file not found: {path}")

            try:
                with open(path) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise CatalogError(f"Invalid catalog syntax in {path}: {e}")

            if isinstance(data, dict):
                data = data.get("shapes")
            if not isinstance(data, list):
                raise CatalogError(
                    f"Catalog {path} must be a list of shapes or a mapping with a 'shapes' list"
                )

            catalog = cls.from_list(data)
        except (CatalogError, ShapeValidationError) as e:
            event = (
                LogEvent.SHAPE_VALIDATION_ERROR
                if isinstance(e, ShapeValidationError)
                else LogEvent.CATALOG_ERROR
            )
            logger.error(
                event=event,
                message="Failed to load shape catalog",
                metadata={"path": str(path)},
                exc_info=e,
            )
            raise

        logger.info(
            event=LogEvent.CATALOG_LOADED,
            message=f"Loaded {len(catalog)} shapes",
            metadata={"path": str(path), "ids": catalog.ids},
        )
        return catalog

    @property
    def ids(self) -> List[str]:
        return [t.shape_id for t in self._targets]

    def get(self, shape_id: str) -> TargetShape:
        """
        Look up a shape by id.

        Raises:
            CatalogError: Unknown id
        """
        return self._targets[self.index_of(shape_id)]

    def index_of(self, shape_id: str) -> int:
        try:
            return self._index[shape_id]
        except KeyError:
            raise CatalogError(f"Unknown shape id: {shape_id!r}. Available: {self.ids}")

    def at(self, index: int) -> TargetShape:
        self._require_non_empty()
        return self._targets[index % len(self._targets)]

    def next_index(self, index: int) -> int:
        """Index after `index`, wrapping to the first shape."""
        self._require_non_empty()
        return (index + 1) % len(self._targets)

    def random_index(self, rng: Optional[random.Random] = None) -> int:
        """Uniformly random index."""
        self._require_non_empty()
        return (rng or random).randrange(len(self._targets))

    def _require_non_empty(self) -> None:
        if not self._targets:
            raise CatalogError("Shape catalog is empty")

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[TargetShape]:
        return iter(self._targets)

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._index

    def __repr__(self) -> str:
        return f"ShapeCatalog(shapes={self.ids})"
