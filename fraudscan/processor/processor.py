import asyncio

from fraudscan.config.settings import Settings
from fraudscan.detection.aggregator import FindingAggregator
from fraudscan.detection.evaluator import FraudRuleEvaluator
from fraudscan.detection.models import DocumentReport, Finding
from fraudscan.detection.registry import PatternRegistry
from fraudscan.extraction.base import ExtractedContent
from fraudscan.extraction.factory import ContentExtractorFactory
from fraudscan.logging.logger import Log
from fraudscan.pricing.base import BaseMarketPriceProvider
from fraudscan.pricing.factory import MarketPriceProviderFactory
from fraudscan.processor.models import UploadedFile


class Processor:
    """Scans one file: extract -> evaluate rules -> aggregate."""

    def __init__(
        self,
        settings: Settings,
        evaluator: FraudRuleEvaluator,
        aggregator: FindingAggregator,
        extractor_factory: type[ContentExtractorFactory] = ContentExtractorFactory,
    ) -> None:
        self._settings = settings
        self._evaluator = evaluator
        self._aggregator = aggregator
        self._extractor_factory = extractor_factory

    async def scan_file(self, file: UploadedFile) -> DocumentReport:
        """Scan a file and return its findings together with rule errors.

        Raises:
            UnsupportedFormatError: if the file extension is not recognized.
            ExtractionError: if the format library cannot decode the file.
        """
        extractor = self._extractor_factory.for_filename(file.name, self._settings)
        content = await asyncio.to_thread(extractor.extract, file.data)
        Log.info("Extracted content", file=file.name, size=_describe(content))

        outcomes = await self._evaluator.evaluate(content)
        report = self._aggregator.aggregate(file.name, outcomes)
        Log.info(
            "Scanned document",
            file=file.name,
            findings=len(report.findings),
            rule_errors=len(report.rule_errors),
        )
        return report

    async def process_file(self, file: UploadedFile) -> list[Finding]:
        """Scan a file and return only its findings.

        Rules that fail are logged and otherwise dropped, so an empty list
        does not prove the file is clean. Use :meth:`scan_file` to get the
        rule errors alongside the findings.
        """
        report = await self.scan_file(file)
        for error in report.rule_errors:
            Log.warning(f"Rule did not complete: {error}", file=file.name)
        return report.findings

    def close(self) -> None:
        self._evaluator.close()


def _describe(content: ExtractedContent) -> str:
    if isinstance(content, str):
        return f"{len(content)} chars"
    return f"{len(content)} rows"


def build_processor(
    settings: Settings,
    registry: PatternRegistry | None = None,
    price_provider: BaseMarketPriceProvider | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if registry is None:
        registry = PatternRegistry.from_settings(settings)
    if price_provider is None:
        price_provider = MarketPriceProviderFactory.create(settings)
    evaluator = FraudRuleEvaluator(
        registry,
        price_provider,
        overcharge_ratio=settings.overcharge_ratio,
    )
    return Processor(
        settings=settings,
        evaluator=evaluator,
        aggregator=FindingAggregator(),
    )
