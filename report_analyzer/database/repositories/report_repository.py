from typing import Any

from psycopg.rows import dict_row

from report_analyzer.database.connection import get_connection
from report_analyzer.processor.exceptions import ReportNotFoundError
from report_analyzer.reports.models import Report

_COLUMNS = "id, user_id, filename, upload_date, raw_report, health_status, file_type"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS reports (
    id            TEXT PRIMARY KEY,
    user_id       TEXT NOT NULL,
    filename      TEXT NOT NULL,
    upload_date   TEXT NOT NULL,
    raw_report    TEXT NOT NULL,
    health_status TEXT NOT NULL DEFAULT 'pending',
    file_type     TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS reports_user_id_idx ON reports (user_id);
"""


class ReportRepository:
    """Database operations for the reports table.

    Saving overwrites the whole row; there is no history or versioning.
    """

    def create_schema(self) -> None:
        with get_connection() as conn:
            conn.execute(SCHEMA_SQL)
            conn.commit()

    def save(self, report: Report) -> None:
        """Insert *report*, or overwrite the stored row with the same id."""
        with get_connection() as conn:
            conn.execute(
                f"""
                INSERT INTO reports ({_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                ON CONFLICT (id) DO UPDATE SET
                    user_id = EXCLUDED.user_id,
                    filename = EXCLUDED.filename,
                    upload_date = EXCLUDED.upload_date,
                    raw_report = EXCLUDED.raw_report,
                    health_status = EXCLUDED.health_status,
                    file_type = EXCLUDED.file_type
                """,
                (
                    report.id,
                    report.user_id,
                    report.filename,
                    report.upload_date,
                    report.raw_report,
                    report.health_status,
                    report.file_type,
                ),
            )
            conn.commit()

    def find_by_id(self, report_id: str) -> Report:
        """Load a report by id.

        Raises:
            ReportNotFoundError: if no report with this id exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM reports WHERE id = %s",
                    (report_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise ReportNotFoundError(f"Report {report_id} not found")
        return self._to_report(row)

    def list_for_user(self, user_id: str) -> list[Report]:
        """All reports of a user, newest upload first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS} FROM reports
                    WHERE user_id = %s
                    ORDER BY upload_date DESC, id DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()
        return [self._to_report(row) for row in rows]

    def delete(self, report_id: str) -> bool:
        """Delete a report; returns False when nothing was deleted."""
        with get_connection() as conn:
            cur = conn.execute("DELETE FROM reports WHERE id = %s", (report_id,))
            conn.commit()
            return cur.rowcount > 0

    @staticmethod
    def _to_report(row: dict[str, Any]) -> Report:
        return Report(
            id=row["id"],
            user_id=row["user_id"],
            filename=row["filename"],
            upload_date=row["upload_date"],
            raw_report=row["raw_report"],
            health_status=row["health_status"],
            file_type=row["file_type"],
        )
