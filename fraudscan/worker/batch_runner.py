import asyncio
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from fraudscan.config.settings import Settings
from fraudscan.detection.aggregator import FindingAggregator
from fraudscan.detection.exceptions import RuleEvaluationError
from fraudscan.detection.models import DocumentReport, Finding
from fraudscan.logging.logger import Log
from fraudscan.processor.file_loader import FileLoader
from fraudscan.processor.models import UploadedFile
from fraudscan.processor.processor import Processor, build_processor
from fraudscan.reporting.base import BaseChartSink
from fraudscan.reporting.sinks import LogChartSink


@dataclass
class FileReport:
    """Outcome of one file in a batch: findings, or the error that stopped it."""

    filename: str
    findings: list[Finding] = field(default_factory=list)
    rule_errors: list[RuleEvaluationError] = field(default_factory=list)
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def from_document(cls, report: DocumentReport) -> "FileReport":
        return cls(
            filename=report.filename,
            findings=list(report.findings),
            rule_errors=list(report.rule_errors),
        )


class BatchRunner:
    """Process files strictly one after another, in submission order.

    One file failing never stops the batch; it yields a FileReport carrying
    the error message instead of findings.
    """

    def __init__(
        self,
        processor: Processor,
        chart_sink: BaseChartSink,
        file_loader: FileLoader | None = None,
    ) -> None:
        self._processor = processor
        self._chart_sink = chart_sink
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._records: list[dict[str, str]] = []

    async def run(self, files: Iterable[UploadedFile]) -> list[FileReport]:
        reports: list[FileReport] = []
        for file in files:
            reports.append(await self.run_one(file))
        return reports

    async def run_paths(self, paths: Iterable[Path | str]) -> list[FileReport]:
        """Load and process local files; a missing file is a per-file failure."""
        reports: list[FileReport] = []
        for path in paths:
            try:
                file = self._file_loader.load(path)
            except OSError as exc:
                reports.append(self._handle_failure(Path(path).name, exc))
                continue
            reports.append(await self.run_one(file))
        return reports

    async def run_one(self, file: UploadedFile) -> FileReport:
        Log.info("Processing file", file=file.name)
        try:
            report = await self._processor.scan_file(file)
        except Exception as exc:
            return self._handle_failure(file.name, exc)

        self._records.extend(finding.to_record() for finding in report.findings)
        self._chart_sink.update_charts(FindingAggregator.tally(report.findings))
        return FileReport.from_document(report)

    def run_sync(self, files: Iterable[UploadedFile]) -> list[FileReport]:
        return asyncio.run(self.run(files))

    def records(self) -> list[dict[str, str]]:
        """Export records for every finding produced this session."""
        return list(self._records)

    def close(self) -> None:
        self._processor.close()

    def __enter__(self) -> "BatchRunner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _handle_failure(self, filename: str, exc: Exception) -> FileReport:
        message = f"Error processing {filename}: {exc}"
        Log.error(message)
        return FileReport(filename=filename, error=message)


def build_batch_runner(
    settings: Settings,
    chart_sink: BaseChartSink | None = None,
) -> BatchRunner:
    """Build a BatchRunner with the default processor and a logging chart sink."""
    Log.configure(settings.log_level)
    return BatchRunner(
        processor=build_processor(settings),
        chart_sink=chart_sink if chart_sink is not None else LogChartSink(),
    )
