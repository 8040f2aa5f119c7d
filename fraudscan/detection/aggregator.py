from collections.abc import Iterable

from fraudscan.detection.models import (
    DocumentReport,
    Finding,
    FindingTally,
    FraudType,
    RiskLevel,
    RuleOutcome,
)


class FindingAggregator:
    """Collects rule outcomes for one document into a report."""

    def aggregate(self, filename: str, outcomes: Iterable[RuleOutcome]) -> DocumentReport:
        """Drop empty outcomes, keeping findings in rule registration order."""
        report = DocumentReport(filename=filename)
        for outcome in outcomes:
            if outcome.error is not None:
                report.rule_errors.append(outcome.error)
            elif outcome.finding is not None:
                report.findings.append(outcome.finding)
        return report

    @staticmethod
    def tally(findings: Iterable[Finding]) -> FindingTally:
        """Count findings by fraud type and by risk level."""
        by_type = dict.fromkeys(FraudType, 0)
        by_risk = dict.fromkeys(RiskLevel, 0)
        for finding in findings:
            by_type[finding.type] += 1
            by_risk[finding.risk] += 1
        return FindingTally(by_type=by_type, by_risk=by_risk)
