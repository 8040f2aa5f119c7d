from fraudscan.detection.aggregator import FindingAggregator
from fraudscan.detection.evaluator import FraudRuleEvaluator
from fraudscan.detection.models import DocumentReport, Finding, FraudType, RiskLevel
from fraudscan.detection.registry import PatternRegistry

__all__ = [
    "DocumentReport",
    "Finding",
    "FindingAggregator",
    "FraudRuleEvaluator",
    "FraudType",
    "PatternRegistry",
    "RiskLevel",
]
