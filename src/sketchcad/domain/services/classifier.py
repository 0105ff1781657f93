"""Containment classification of beds into user-drawn regions.

This module provides:
- point_in_polygon: Even-odd ray casting containment test
- GeometryClassifier: Assigns bed indices to the group keys of the regions
  that contain them
- order_group_keys: Index keys ascending, then the other keys as given
- resolve_group_key: Picks a single group for a bed (last group wins)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from ..value_objects import Point2D, Region, RegionRejection

__all__ = [
    "DEFAULT_GROUP_KEY",
    "ClassificationResult",
    "GeometryClassifier",
    "is_index_key",
    "order_group_keys",
    "point_in_polygon",
    "resolve_group_key",
]


logger = logging.getLogger(__name__)


# Group key used for beds that no region contains
DEFAULT_GROUP_KEY = "0"


# Keys at or above this value are not array indices and keep insertion order
MAX_INDEX_KEY = 2**32 - 1


def is_index_key(group_key: str) -> bool:
    """True for canonical non-negative integer keys such as ``"0"`` or ``"12"``.

    ``"01"``, ``"-1"``, ``"1.0"`` and ``" 1"`` are not index keys.
    """
    if not (group_key.isascii() and group_key.isdigit()):
        return False
    if len(group_key) > 1 and group_key.startswith("0"):
        return False
    return int(group_key) < MAX_INDEX_KEY


def order_group_keys(keys: Iterable[str]) -> list[str]:
    """Order group keys the way the clustering result record lists them.

    Index keys come first in ascending numeric order, the remaining keys
    follow in the order given.
    """
    keys = list(keys)
    index_keys = sorted((key for key in keys if is_index_key(key)), key=int)
    return index_keys + [key for key in keys if not is_index_key(key)]


def point_in_polygon(point: Point2D, polygon: Sequence[Point2D]) -> bool:
    """Test whether a point lies inside a polygon using even-odd ray casting.

    The polygon is treated as closed; the first vertex does not need to be
    repeated at the end. Points exactly on an edge may fall either way.

    Args:
        point: The ``(x, y)`` point to test.
        polygon: Polygon vertices in order.

    Returns:
        True if the point is inside the polygon.
    """
    x, y = point
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        # The first test guarantees yi != yj, so the division is safe
        if (yi > y) != (yj > y) and x < xj + (y - yj) * (xi - xj) / (yi - yj):
            inside = not inside
        j = i
    return inside


def resolve_group_key(groups: Mapping[str, frozenset[int]], index: int) -> str:
    """Return the single group a bed is drawn on.

    Groups are scanned in mapping order and the last one containing the bed
    wins. Beds in no group fall back to ``DEFAULT_GROUP_KEY``.
    """
    key = DEFAULT_GROUP_KEY
    for group_key, members in groups.items():
        if index in members:
            key = group_key
    return key


@dataclass(frozen=True)
class ClassificationResult:
    """Output of a classification pass.

    Attributes:
        groups: Group key -> bed indices, ordered by ``order_group_keys``:
            index keys ascending, then other keys by first appearance among
            the valid regions. Groups whose regions contain nothing are
            present with an empty set.
        rejections: One entry per region left out of classification.
    """

    groups: dict[str, frozenset[int]] = field(default_factory=dict)
    rejections: tuple[RegionRejection, ...] = ()

    @property
    def has_rejections(self) -> bool:
        return bool(self.rejections)

    def members_of(self, group_key: str | int) -> frozenset[int]:
        """Bed indices of a group, empty if the key is unknown."""
        return self.groups.get(str(group_key), frozenset())

    def final_labels(self, bed_count: int) -> list[str]:
        """Resolved group key for each bed index."""
        return [resolve_group_key(self.groups, index) for index in range(bed_count)]


class GeometryClassifier:
    """Assigns beds to clusters by testing their points against regions.

    Every (point, region) pair is tested independently, so a bed can end up
    in more than one cluster when regions with different keys overlap.
    """

    def classify(
        self,
        points: Sequence[Point2D],
        regions: Sequence[Region],
    ) -> ClassificationResult:
        """Classify points into the group keys of the regions containing them.

        Args:
            points: Coordinates of each bed in the projection space. The
                position of a point is the index of its bed.
            regions: User-drawn regions. Regions with fewer than three points
                are rejected and reported, the rest are still processed.

        Returns:
            ClassificationResult with the ordered group mapping and the list
            of rejected regions.
        """
        valid_regions: list[Region] = []
        rejections: list[RegionRejection] = []

        for region_index, region in enumerate(regions):
            if not region.is_valid:
                reason = (
                    f"Region needs at least 3 points to form a polygon "
                    f"(got {len(region.points)})"
                )
                logger.warning(
                    f"Rejected region {region_index} for cluster "
                    f"'{region.group_key}': {reason}"
                )
                rejections.append(
                    RegionRejection(
                        group_key=region.group_key,
                        reason=reason,
                        region_index=region_index,
                    )
                )
                continue
            valid_regions.append(region)

        memberships: dict[str, set[int]] = {}
        for region in valid_regions:
            memberships.setdefault(region.group_key, set())

        for index, point in enumerate(points):
            for region in valid_regions:
                if point_in_polygon(point, region.points):
                    memberships[region.group_key].add(index)

        groups = {
            key: frozenset(memberships[key]) for key in order_group_keys(memberships)
        }
        logger.info(
            f"Classified {len(points)} points against {len(valid_regions)} regions "
            f"into {len(groups)} clusters"
        )
        return ClassificationResult(groups=groups, rejections=tuple(rejections))
