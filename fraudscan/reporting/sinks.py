from fraudscan.detection.models import FindingTally, FraudType, RiskLevel
from fraudscan.logging.logger import Log
from fraudscan.reporting.base import BaseChartSink


class LogChartSink(BaseChartSink):
    """Writes each tally to the log instead of rendering charts."""

    def update_charts(self, tally: FindingTally) -> None:
        types = {t.value: n for t, n in tally.by_type.items() if n}
        risks = {r.value: n for r, n in tally.by_risk.items() if n}
        Log.info(f"Chart update: {tally.total} findings, types={types}, risks={risks}")


class RecordingChartSink(BaseChartSink):
    """Keeps running totals across the session, like a live chart would."""

    def __init__(self) -> None:
        self.by_type: dict[FraudType, int] = {}
        self.by_risk: dict[RiskLevel, int] = {}
        self.reset()

    def update_charts(self, tally: FindingTally) -> None:
        for fraud_type, count in tally.by_type.items():
            self.by_type[fraud_type] = self.by_type.get(fraud_type, 0) + count
        for risk, count in tally.by_risk.items():
            self.by_risk[risk] = self.by_risk.get(risk, 0) + count

    def reset(self) -> None:
        self.by_type = dict.fromkeys(FraudType, 0)
        self.by_risk = dict.fromkeys(RiskLevel, 0)
