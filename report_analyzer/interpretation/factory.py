from typing import ClassVar

from report_analyzer.config.settings import Settings
from report_analyzer.interpretation.base import BaseInterpreter
from report_analyzer.interpretation.example_client_adapter import ExampleClientAdapter
from report_analyzer.interpretation.interpreter import Interpreter
from report_analyzer.interpretation.openai_client_adapter import OpenAIClientAdapter
from report_analyzer.pdf.factory import PdfExtractorFactory


class InterpreterFactory:
    """Creates the interpreter for ``settings.interpretation_provider``."""

    PROVIDER_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "aimlapi": "https://api.aimlapi.com/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseInterpreter:
        provider = settings.interpretation_provider.strip().lower()
        pdf_extractor = PdfExtractorFactory.create(settings)
        if provider == "example":
            return Interpreter(
                client=ExampleClientAdapter(),
                model="example",
                pdf_extractor=pdf_extractor,
                max_tokens=settings.interpretation_max_tokens,
            )
        client = OpenAIClientAdapter(
            api_key=settings.interpretation_api_key,
            timeout_seconds=settings.interpretation_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Interpreter(
            client=client,
            model=settings.interpretation_model_name,
            pdf_extractor=pdf_extractor,
            max_tokens=settings.interpretation_max_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        configured = settings.interpretation_base_url.strip()
        if provider == "openai_compatible":
            if not configured:
                raise ValueError(
                    "interpretation_base_url is required for "
                    "interpretation_provider=openai_compatible"
                )
            return configured
        if provider not in cls.PROVIDER_BASE_URLS:
            supported = ["example", "openai_compatible", *sorted(cls.PROVIDER_BASE_URLS)]
            raise ValueError(
                f"Unknown interpretation provider '{provider}'. Choose from: {supported}"
            )
        return configured or cls.PROVIDER_BASE_URLS[provider]
