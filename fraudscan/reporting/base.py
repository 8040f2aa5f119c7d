from abc import ABC, abstractmethod

from fraudscan.detection.models import FindingTally


class BaseChartSink(ABC):
    """Contract for visualization consumers of finding counts."""

    @abstractmethod
    def update_charts(self, tally: FindingTally) -> None:
        """Receive the per-type and per-risk counts for one document."""
