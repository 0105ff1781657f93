"""Application commands (use cases) for bed clustering."""

from __future__ import annotations

import logging

from sketchcad.domain import (
    ClassificationResult,
    GeometryClassifier,
    StatisticsAggregator,
)

from .dtos import ClusteringInput, ClusteringOutput

logger = logging.getLogger(__name__)


class ClusterBedsCommand:
    """Command to classify beds into clusters and compute their statistics."""

    def __init__(
        self,
        classifier: GeometryClassifier | None = None,
        aggregator: StatisticsAggregator | None = None,
    ) -> None:
        self.classifier = classifier or GeometryClassifier()
        self.aggregator = aggregator or StatisticsAggregator()

    def execute(self, clustering_input: ClusteringInput) -> ClusteringOutput:
        """Execute the clustering command.

        Args:
            clustering_input: Beds, their projection points and the regions.

        Returns:
            ClusteringOutput with the group mapping, rejected regions and
            statistics. Input errors are returned in ``errors`` instead of
            being raised.
        """
        errors = clustering_input.validate()
        if errors:
            return ClusteringOutput(
                beds=clustering_input.beds,
                classification=ClassificationResult(),
                statistics=None,
                export_type=clustering_input.export_type,
                errors=errors,
            )

        classification = self.classifier.classify(
            clustering_input.points, clustering_input.regions
        )
        statistics = self.aggregator.aggregate_beds(
            clustering_input.beds, classification.groups
        )
        logger.info(
            f"Clustered {statistics.clustered_beds} of {statistics.total_beds} beds "
            f"into {statistics.num_clusters} clusters"
        )

        return ClusteringOutput(
            beds=clustering_input.beds,
            classification=classification,
            statistics=statistics,
            export_type=clustering_input.export_type,
        )
