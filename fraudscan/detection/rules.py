"""The fixed battery of fraud rules.

Each rule takes a :class:`RuleContext` and returns at most one Finding.
Rules read the registry as it stood before the current document and stage
any writes on ``context.update``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from fraudscan.detection.exceptions import RuleEvaluationError
from fraudscan.detection.fields import (
    content_to_text,
    find_line_items,
    find_payment_account,
    find_vendor,
    fingerprint,
)
from fraudscan.detection.models import Finding, FraudType, LineItem, RiskLevel
from fraudscan.detection.registry import PatternRegistry, RegistryUpdate
from fraudscan.extraction.base import ExtractedContent
from fraudscan.pricing.base import BaseMarketPriceProvider
from fraudscan.pricing.exceptions import MarketPriceUnavailableError


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may look at for one document."""

    content: ExtractedContent
    text: str
    vendor: str | None
    payment_account: str | None
    line_items: tuple[LineItem, ...]
    registry: PatternRegistry
    update: RegistryUpdate
    price_provider: BaseMarketPriceProvider
    overcharge_ratio: float

    @classmethod
    def build(
        cls,
        content: ExtractedContent,
        *,
        registry: PatternRegistry,
        update: RegistryUpdate,
        price_provider: BaseMarketPriceProvider,
        overcharge_ratio: float,
    ) -> RuleContext:
        text = content_to_text(content)
        return cls(
            content=content,
            text=text,
            vendor=find_vendor(text),
            payment_account=find_payment_account(text),
            line_items=tuple(find_line_items(content)),
            registry=registry,
            update=update,
            price_provider=price_provider,
            overcharge_ratio=overcharge_ratio,
        )


RuleCheck = Callable[[RuleContext], Finding | None]


@dataclass(frozen=True)
class RuleDescriptor:
    """A registered rule. Reserved rules carry no check."""

    fraud_type: FraudType
    check: RuleCheck | None = None

    @property
    def implemented(self) -> bool:
        return self.check is not None


def check_phishing_scam(context: RuleContext) -> Finding | None:
    if context.registry.PHISHING_RE.match(context.text):
        return Finding(
            type=FraudType.PHISHING_SCAM,
            risk=RiskLevel.HIGH,
            details="Suspicious urgency and payment-related language detected",
        )
    return None


def check_overcharging(context: RuleContext) -> Finding | None:
    if not context.line_items:
        return None
    try:
        market_prices = context.price_provider.get_market_prices()
    except MarketPriceUnavailableError as exc:
        raise RuleEvaluationError(FraudType.OVERCHARGING, str(exc)) from exc

    inflated = [
        item
        for item in context.line_items
        if item.name in market_prices
        and item.price > market_prices[item.name] * context.overcharge_ratio
    ]
    if not inflated:
        return None
    names = ", ".join(sorted({item.name for item in inflated}))
    return Finding(
        type=FraudType.OVERCHARGING,
        risk=RiskLevel.HIGH,
        details=f"{len(inflated)} items found with inflated prices ({names})",
    )


def check_duplicate(context: RuleContext) -> Finding | None:
    if not context.text.strip():
        return None
    digest = fingerprint(context.text)
    if context.registry.has_fingerprint(digest):
        return Finding(
            type=FraudType.DUPLICATE_INVOICE,
            risk=RiskLevel.HIGH,
            details="Exact match found with existing invoice",
        )
    context.update.record_fingerprint(digest, context.text)
    return None


def check_kickback(context: RuleContext) -> Finding | None:
    if context.registry.KICKBACK_RE.match(context.text):
        return Finding(
            type=FraudType.KICKBACK,
            risk=RiskLevel.MEDIUM,
            details="Referral and commission language detected",
        )
    return None


def check_phantom_vendor(context: RuleContext) -> Finding | None:
    """Flag a vendor's first appearance once any vendor history exists; repeats never flag."""
    vendor = context.vendor
    if vendor is None:
        return None
    context.update.record_vendor(vendor)
    registry = context.registry
    if registry.has_vendor_history() and not registry.knows_vendor(vendor):
        return Finding(
            type=FraudType.PHANTOM_VENDOR,
            risk=RiskLevel.MEDIUM,
            details=f"Vendor '{vendor}' has no prior history",
        )
    return None


def check_shell_company(context: RuleContext) -> Finding | None:
    identifier = context.registry.find_known_bad(context.text)
    if identifier is None:
        return None
    return Finding(
        type=FraudType.SHELL_COMPANY,
        risk=RiskLevel.HIGH,
        details=f"'{identifier}' is a known shell company",
    )


def check_cross_company(context: RuleContext) -> Finding | None:
    account, vendor = context.payment_account, context.vendor
    if account is None or vendor is None:
        return None
    owner = context.registry.account_owner(account)
    if owner is None:
        context.update.record_account_owner(account, vendor)
        return None
    if owner == vendor:
        return None
    return Finding(
        type=FraudType.CROSS_COMPANY_FRAUD,
        risk=RiskLevel.HIGH,
        details=(
            f"Payment account ending {account[-4:]} is used by both "
            f"'{owner}' and '{vendor}'"
        ),
    )


def check_advance_payment_scam(context: RuleContext) -> Finding | None:
    if context.registry.ADVANCE_PAYMENT_RE.match(context.text):
        return Finding(
            type=FraudType.ADVANCE_PAYMENT_SCAM,
            risk=RiskLevel.HIGH,
            details="Advance payment demand detected",
        )
    return None


DEFAULT_RULES: tuple[RuleDescriptor, ...] = (
    RuleDescriptor(FraudType.PHISHING_SCAM, check_phishing_scam),
    RuleDescriptor(FraudType.OVERCHARGING, check_overcharging),
    RuleDescriptor(FraudType.DUPLICATE_INVOICE, check_duplicate),
    RuleDescriptor(FraudType.ALTERED_INVOICE),
    RuleDescriptor(FraudType.KICKBACK, check_kickback),
    RuleDescriptor(FraudType.PHANTOM_VENDOR, check_phantom_vendor),
    RuleDescriptor(FraudType.SHELL_COMPANY, check_shell_company),
    RuleDescriptor(FraudType.PAYROLL_FRAUD),
    RuleDescriptor(FraudType.CROSS_COMPANY_FRAUD, check_cross_company),
    RuleDescriptor(FraudType.ADVANCE_PAYMENT_SCAM, check_advance_payment_scam),
)
