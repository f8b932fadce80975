"""Offline interpretation client.

Returns a fixed markdown report in the layout the system prompt asks for, so
the whole upload -> analyze flow can run without network access.
"""

from typing import Any, ClassVar

from report_analyzer.interpretation.client_base import BaseInterpretationClient


class ExampleClientAdapter(BaseInterpretationClient):
    """Adapter that ignores its input and returns ``DEFAULT_REPORT``."""

    DEFAULT_REPORT: ClassVar[str] = (
        "# Blood Test Report Interpretation\n"
        "\n"
        "## Test Results\n"
        "\n"
        "| Parameter | Value | Status | Reference Range |\n"
        "|-----------|-------|--------|-----------------|\n"
        "| Glucose | 110 mg/dL | High | 70-100 mg/dL |\n"
        "| Hemoglobin | 14.2 g/dL | Normal | 13.5-17.5 g/dL |\n"
        "| Sodium | 140 mmol/L | Normal | 135-145 mmol/L |\n"
        "\n"
        "## Observations\n"
        "\n"
        "Cholesterol: 180 mg/dL is within the desirable range.\n"
        "Your fasting glucose is slightly elevated.\n"
        "\n"
        "## Summary\n"
        "\n"
        "Overall your results look good; keep an eye on blood sugar.\n"
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        max_tokens: int,
        system_prompt: str,
        user_content: list[dict[str, Any]],
    ) -> str:
        _ = model, max_tokens, system_prompt, user_content
        return self.DEFAULT_REPORT
