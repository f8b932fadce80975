import mimetypes
from pathlib import Path

from report_analyzer.processor.exceptions import FileReadError, UnsupportedFileTypeError
from report_analyzer.processor.models import UploadedFile


class FileLoader:
    """Reads a local blood-test document into an UploadedFile."""

    SUPPORTED_PREFIXES = ("image/", "application/pdf")

    def load(self, path: Path) -> UploadedFile:
        """Read *path* and detect its mime type from the file name.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedFileTypeError: if the file is neither a PDF nor an image.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        mime_type = self._detect_mime_type(path)
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        return UploadedFile(filename=path.name, content=content, mime_type=mime_type)

    def _detect_mime_type(self, path: Path) -> str:
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type is None or not mime_type.startswith(self.SUPPORTED_PREFIXES):
            raise UnsupportedFileTypeError(
                f"'{path.name}' is not a PDF or image (detected {mime_type!r})"
            )
        return mime_type
