import asyncio
from collections.abc import Sequence

from fraudscan.detection.exceptions import RuleEvaluationError
from fraudscan.detection.models import RuleOutcome
from fraudscan.detection.registry import PatternRegistry, RegistryUpdate
from fraudscan.detection.rules import DEFAULT_RULES, RuleContext, RuleDescriptor
from fraudscan.extraction.base import ExtractedContent
from fraudscan.logging.logger import Log
from fraudscan.pricing.base import BaseMarketPriceProvider


class FraudRuleEvaluator:
    """Runs every registered rule against one document's content.

    Rules run as parallel tasks over the same content. Registry writes are
    committed only after all of them finish, so a rule never observes a
    sibling's write for the same document.
    """

    def __init__(
        self,
        registry: PatternRegistry,
        price_provider: BaseMarketPriceProvider,
        *,
        overcharge_ratio: float = 1.5,
        rules: Sequence[RuleDescriptor] = DEFAULT_RULES,
    ) -> None:
        self._registry = registry
        self._price_provider = price_provider
        self._overcharge_ratio = overcharge_ratio
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[RuleDescriptor, ...]:
        return self._rules

    def close(self) -> None:
        self._price_provider.close()

    async def evaluate(self, content: ExtractedContent) -> list[RuleOutcome]:
        """Return one outcome per registered rule, in registration order."""
        update = RegistryUpdate()
        context = RuleContext.build(
            content,
            registry=self._registry,
            update=update,
            price_provider=self._price_provider,
            overcharge_ratio=self._overcharge_ratio,
        )
        active = [rule for rule in self._rules if rule.check is not None]
        results = await asyncio.gather(
            *(asyncio.to_thread(rule.check, context) for rule in active),  # type: ignore[arg-type]
            return_exceptions=True,
        )
        pending = iter(results)

        outcomes: list[RuleOutcome] = []
        for rule in self._rules:
            if not rule.implemented:
                outcomes.append(RuleOutcome(fraud_type=rule.fraud_type, skipped=True))
                continue
            result = next(pending)
            if isinstance(result, BaseException):
                outcomes.append(self._failed(rule, result))
            else:
                outcomes.append(RuleOutcome(fraud_type=rule.fraud_type, finding=result))

        self._registry.commit(update)
        return outcomes

    @staticmethod
    def _failed(rule: RuleDescriptor, exc: BaseException) -> RuleOutcome:
        if not isinstance(exc, Exception):
            raise exc
        if isinstance(exc, RuleEvaluationError):
            error = exc
        else:
            error = RuleEvaluationError(rule.fraud_type, f"rule raised {exc!r}")
            error.__cause__ = exc
        Log.error(f"Rule failed: {error}", rule=rule.fraud_type.name)
        return RuleOutcome(fraud_type=rule.fraud_type, error=error)
