from datetime import datetime, timezone

from report_analyzer.config.settings import Settings
from report_analyzer.database.repositories.report_repository import ReportRepository
from report_analyzer.interpretation.base import BaseInterpreter
from report_analyzer.interpretation.factory import InterpreterFactory
from report_analyzer.logging.logger import Log
from report_analyzer.processor.models import UploadedFile
from report_analyzer.reports.analysis import analyze_report, determine_health_status
from report_analyzer.reports.models import Report, ReportAnalysis
from report_analyzer.reports.timeline import TimelineEntry, build_timeline


class Processor:
    """Orchestrates report upload and viewing.

    Upload: interpret -> flag -> persist. View: load -> analyze.
    Analysis is never stored; it is recomputed from the report text.
    """

    def __init__(
        self,
        interpreter: BaseInterpreter,
        report_repo: ReportRepository,
    ) -> None:
        self._interpreter = interpreter
        self._report_repo = report_repo

    def upload(self, upload: UploadedFile, user_id: str) -> Report:
        """Interpret an uploaded document and store the resulting report."""
        Log.info(f"Uploading {upload.filename} for user {user_id}")
        raw_report = self._interpreter.interpret(upload)

        now = datetime.now(timezone.utc)
        report = Report(
            id=f"report-{int(now.timestamp() * 1000)}",
            user_id=user_id,
            filename=upload.filename,
            upload_date=now.isoformat(),
            raw_report=raw_report,
            health_status=determine_health_status(raw_report),
            file_type=upload.file_type,
        )
        self._report_repo.save(report)
        Log.info(f"Stored {report.id} ({report.health_status})")
        return report

    def view(self, report_id: str) -> tuple[Report, ReportAnalysis]:
        report = self._report_repo.find_by_id(report_id)
        analysis = analyze_report(report)
        Log.info(
            f"Analyzed {report_id}: {len(analysis.parameters)} parameters, "
            f"score {analysis.health_score:.1f}"
        )
        return report, analysis

    def list_reports(self, user_id: str) -> list[Report]:
        return self._report_repo.list_for_user(user_id)

    def timeline(self, user_id: str) -> list[TimelineEntry]:
        return build_timeline(self._report_repo.list_for_user(user_id))

    def delete(self, report_id: str) -> bool:
        deleted = self._report_repo.delete(report_id)
        if deleted:
            Log.info(f"Deleted {report_id}")
        else:
            Log.warning(f"Nothing to delete for {report_id}")
        return deleted


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(
        interpreter=InterpreterFactory.create(settings),
        report_repo=ReportRepository(),
    )
