"""Tests for InterpreterFactory."""

from unittest.mock import patch

import pytest

from report_analyzer.config.settings import Settings
from report_analyzer.interpretation.base import BaseInterpreter
from report_analyzer.interpretation.factory import InterpreterFactory
from report_analyzer.interpretation.interpreter import Interpreter
from report_analyzer.processor.models import UploadedFile


class TestInterpreterFactory:
    def test_creates_example_interpreter(self) -> None:
        settings = Settings(interpretation_provider="example")
        interpreter = InterpreterFactory.create(settings)
        assert isinstance(interpreter, BaseInterpreter)
        assert isinstance(interpreter, Interpreter)
        upload = UploadedFile(filename="a.png", content=b"x", mime_type="image/png")
        assert interpreter.interpret(upload).startswith("# Blood Test Report Interpretation")

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            interpretation_provider="openai",
            interpretation_api_key="openai-key",
            interpretation_model_name="gpt-4o",
            interpretation_timeout_seconds=42,
            interpretation_base_url="",
        )
        with patch("report_analyzer.interpretation.factory.OpenAIClientAdapter") as mock_adapter:
            interpreter = InterpreterFactory.create(settings)
        assert isinstance(interpreter, Interpreter)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_provider_default_base_url_for_aimlapi(self) -> None:
        settings = Settings(
            interpretation_provider="aimlapi",
            interpretation_api_key="k",
            interpretation_timeout_seconds=60,
            interpretation_base_url="",
        )
        with patch("report_analyzer.interpretation.factory.OpenAIClientAdapter") as mock_adapter:
            InterpreterFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=60,
            base_url="https://api.aimlapi.com/v1",
        )

    def test_configured_base_url_wins(self) -> None:
        settings = Settings(
            interpretation_provider="aimlapi",
            interpretation_api_key="k",
            interpretation_timeout_seconds=60,
            interpretation_base_url="https://proxy.example.com/v1",
        )
        with patch("report_analyzer.interpretation.factory.OpenAIClientAdapter") as mock_adapter:
            InterpreterFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://proxy.example.com/v1"

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            interpretation_provider="openai_compatible",
            interpretation_api_key="k",
            interpretation_timeout_seconds=60,
            interpretation_base_url="https://example.com/v1",
        )
        with patch("report_analyzer.interpretation.factory.OpenAIClientAdapter") as mock_adapter:
            InterpreterFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://example.com/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(
            interpretation_provider="openai_compatible",
            interpretation_base_url="",
        )
        with pytest.raises(ValueError, match="interpretation_base_url"):
            InterpreterFactory.create(settings)

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(interpretation_provider="unknown")
        with pytest.raises(ValueError, match="Unknown interpretation provider"):
            InterpreterFactory.create(settings)
