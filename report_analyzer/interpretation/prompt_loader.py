from pathlib import Path

from report_analyzer.interpretation.exceptions import InterpretationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

USER_PROMPT_TEMPLATE = "Attached is my blood test report. Please interpret it. {filename}"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the interpretation system prompt.

    Args:
        path: Prompt file. Defaults to the bundled system_prompt.txt.

    Raises:
        InterpretationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise InterpretationError(f"Failed to load system prompt: {exc}") from exc


def build_user_prompt(filename: str) -> str:
    return USER_PROMPT_TEMPLATE.format(filename=filename)
