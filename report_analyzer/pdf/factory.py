from report_analyzer.config.settings import Settings
from report_analyzer.pdf.base import BasePdfExtractor
from report_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from report_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter

PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


class PdfExtractorFactory:
    """Builds the extractor for ``settings.pdf_engine``."""

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        if engine not in PDF_ENGINES:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(PDF_ENGINES)}"
            )
        return PDF_ENGINES[engine](tables_as_markdown=settings.pdf_tables_as_markdown)
