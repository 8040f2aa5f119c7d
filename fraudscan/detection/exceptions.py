from fraudscan.detection.models import FraudType
from fraudscan.exceptions import FraudScanError


class RuleEvaluationError(FraudScanError):
    """Raised when a single fraud rule cannot complete for a document."""

    def __init__(self, fraud_type: FraudType, message: str) -> None:
        super().__init__(message)
        self.fraud_type = fraud_type

    def __str__(self) -> str:
        return f"{self.fraud_type.value}: {super().__str__()}"
