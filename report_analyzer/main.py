import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from report_analyzer.config.settings import Settings
from report_analyzer.database.connection import close_pool, init_pool
from report_analyzer.database.repositories.report_repository import ReportRepository
from report_analyzer.interpretation.exceptions import InterpretationError
from report_analyzer.logging.logger import Log
from report_analyzer.pdf.exceptions import PdfExtractionError
from report_analyzer.processor.exceptions import ProcessorError
from report_analyzer.processor.file_loader import FileLoader
from report_analyzer.processor.processor import Processor, build_processor
from report_analyzer.reports.analysis import analyze_report
from report_analyzer.reports.timeline import TimelineEntry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-analyzer",
        description="Interpret, store and score blood test reports.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Score a markdown report file (no storage)")
    analyze.add_argument("path", type=Path)

    upload = commands.add_parser("upload", help="Interpret and store a PDF or image")
    upload.add_argument("path", type=Path)
    upload.add_argument("--user", required=True)

    listing = commands.add_parser("list", help="List a user's reports")
    listing.add_argument("--user", required=True)

    show = commands.add_parser("show", help="Show a stored report with its analysis")
    show.add_argument("report_id")

    timeline = commands.add_parser("timeline", help="Key parameters over time")
    timeline.add_argument("--user", required=True)

    delete = commands.add_parser("delete", help="Delete a stored report")
    delete.add_argument("report_id")
    return parser


def _print_json(payload: object) -> None:
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def _timeline_entry_to_dict(entry: TimelineEntry) -> dict[str, object]:
    return {
        "id": entry.report.id,
        "filename": entry.report.filename,
        "uploadDate": entry.report.upload_date,
        "healthStatus": entry.report.health_status,
        "keyParameters": [
            {"name": p.name, "value": p.value, "status": p.status.value}
            for p in entry.key_parameters
        ],
        "changes": [
            {
                "name": t.name,
                "diff": round(t.diff, 1),
                "percentDiff": round(t.percent_diff, 1),
                "direction": t.direction,
            }
            for t in entry.trends
        ],
    }


def _run_stored(args: argparse.Namespace, processor: Processor) -> int:
    if args.command == "upload":
        report = processor.upload(FileLoader().load(args.path), user_id=args.user)
        _print_json(report.to_dict())
    elif args.command == "list":
        _print_json([
            {key: value for key, value in report.to_dict().items() if key != "rawReport"}
            for report in processor.list_reports(args.user)
        ])
    elif args.command == "show":
        report, analysis = processor.view(args.report_id)
        _print_json({"report": report.to_dict(), "analysis": analysis.to_dict()})
    elif args.command == "timeline":
        _print_json([_timeline_entry_to_dict(e) for e in processor.timeline(args.user)])
    elif args.command == "delete":
        if not processor.delete(args.report_id):
            Log.error(f"Report {args.report_id} not found")
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> configure -> dispatch."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        if args.command == "analyze":
            text = args.path.read_text(encoding="utf-8")
            _print_json(analyze_report(text).to_dict())
            return 0

        init_pool(settings)
        try:
            ReportRepository().create_schema()
            return _run_stored(args, build_processor(settings))
        finally:
            close_pool()
    except (ProcessorError, InterpretationError, PdfExtractionError, OSError, ValueError) as exc:
        Log.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
