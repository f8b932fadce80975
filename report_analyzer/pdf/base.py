from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence


def table_to_markdown(rows: Iterable[Sequence[str | None]]) -> list[str]:
    """Render extracted table rows as ``| a | b |`` lines.

    Empty cells stay empty, line breaks inside a cell become spaces and a
    literal ``|`` becomes ``/``. Rows with no content are dropped.
    """
    lines: list[str] = []
    for row in rows:
        cells = [" ".join((cell or "").split()).replace("|", "/") for cell in row]
        if any(cells):
            lines.append("| " + " | ".join(cells) + " |")
    return lines


class BasePdfExtractor(ABC):
    """Turns an uploaded PDF lab report into plain text for interpretation."""

    def __init__(self, tables_as_markdown: bool = True) -> None:
        self._tables_as_markdown = tables_as_markdown

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Return the report text, one block per page.

        When ``tables_as_markdown`` is on, each detected table is appended
        after its page text as markdown rows.

        Raises:
            PdfExtractionError: if the document cannot be read.
        """

    @staticmethod
    def _join_pages(pages: Iterable[str]) -> str:
        return "\n".join(page.strip() for page in pages if page.strip())
