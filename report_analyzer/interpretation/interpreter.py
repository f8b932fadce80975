"""AI-backed blood test interpretation."""

from pathlib import Path
from typing import Any

from report_analyzer.interpretation.base import BaseInterpreter
from report_analyzer.interpretation.client_base import BaseInterpretationClient
from report_analyzer.interpretation.exceptions import InterpretationError
from report_analyzer.interpretation.prompt_loader import build_user_prompt, load_system_prompt
from report_analyzer.logging.logger import Log
from report_analyzer.pdf.base import BasePdfExtractor
from report_analyzer.pdf.exceptions import PdfExtractionError
from report_analyzer.processor.models import UploadedFile


class Interpreter(BaseInterpreter):
    """Sends an uploaded report to a chat model and returns its markdown answer.

    Images travel as base64 data URLs. PDFs are sent as their extracted text,
    since chat vision inputs accept images only.
    """

    def __init__(
        self,
        *,
        client: BaseInterpretationClient,
        model: str,
        pdf_extractor: BasePdfExtractor,
        max_tokens: int = 2000,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._pdf_extractor = pdf_extractor
        self._max_tokens = max_tokens
        self._system_prompt = load_system_prompt(system_prompt_path)

    def interpret(self, upload: UploadedFile) -> str:
        user_content = self._build_user_content(upload)
        Log.debug(f"Interpreting {upload.filename} ({upload.file_type}) with {self._model}")

        report = self._client.create_chat_completion(
            model=self._model,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_content=user_content,
        )
        Log.info(f"Interpretation complete for {upload.filename}: {len(report)} chars")
        return report.strip()

    def _build_user_content(self, upload: UploadedFile) -> list[dict[str, Any]]:
        prompt = build_user_prompt(upload.filename)
        if upload.file_type == "image":
            return [
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": upload.to_data_url()}},
            ]

        try:
            text = self._pdf_extractor.extract(upload.content)
        except PdfExtractionError as exc:
            raise InterpretationError(f"Cannot read {upload.filename}: {exc}") from exc
        if not text:
            raise InterpretationError(f"No text found in {upload.filename}")
        return [{"type": "text", "text": f"{prompt}\n\n{text}"}]
