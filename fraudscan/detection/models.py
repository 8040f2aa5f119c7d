from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fraudscan.detection.exceptions import RuleEvaluationError


class FraudType(str, Enum):
    """One tag per registered rule, in registration order."""

    PHISHING_SCAM = "Phishing Scam"
    OVERCHARGING = "Overcharging"
    DUPLICATE_INVOICE = "Duplicate Invoice"
    ALTERED_INVOICE = "Altered Invoice"
    KICKBACK = "Kickback"
    PHANTOM_VENDOR = "Phantom Vendor"
    SHELL_COMPANY = "Shell Company"
    PAYROLL_FRAUD = "Payroll Fraud"
    CROSS_COMPANY_FRAUD = "Cross-Company Fraud"
    ADVANCE_PAYMENT_SCAM = "Advance Payment Scam"


class RiskLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Finding:
    """A single fraud rule match."""

    type: FraudType
    risk: RiskLevel
    details: str

    def to_record(self) -> dict[str, str]:
        """Plain export record for spreadsheet/document writers."""
        return {
            "type": self.type.value,
            "risk": self.risk.value,
            "details": self.details,
        }


@dataclass(frozen=True)
class LineItem:
    """A priced line parsed from document content."""

    name: str
    price: float


@dataclass(frozen=True)
class RuleOutcome:
    """Result of dispatching one rule against one document."""

    fraud_type: FraudType
    finding: Finding | None = None
    error: RuleEvaluationError | None = None
    skipped: bool = False


@dataclass
class DocumentReport:
    """Findings for one document plus the rules that could not complete."""

    filename: str
    findings: list[Finding] = field(default_factory=list)
    rule_errors: list[RuleEvaluationError] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.findings and not self.rule_errors


@dataclass(frozen=True)
class FindingTally:
    """Counts consumed by chart sinks."""

    by_type: dict[FraudType, int]
    by_risk: dict[RiskLevel, int]

    @property
    def total(self) -> int:
        return sum(self.by_risk.values())
