import base64
from dataclasses import dataclass

from report_analyzer.reports.models import ReportFileType


@dataclass(frozen=True)
class UploadedFile:
    """A blood-test document as received from the user."""

    filename: str
    content: bytes
    mime_type: str

    @property
    def file_type(self) -> ReportFileType:
        return "pdf" if "pdf" in self.mime_type.lower() else "image"

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"
