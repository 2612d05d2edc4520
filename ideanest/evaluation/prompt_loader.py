from pathlib import Path

from ideanest.evaluation.exceptions import EvaluationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the evaluation prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled evaluation_prompt.txt.

    Returns:
        The raw template string with {idea_title}, {idea_description}
        and {response_example} placeholders.

    Raises:
        EvaluationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "evaluation_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EvaluationError(f"Failed to load prompt template: {exc}") from exc


def load_system_prompt(path: Path | None = None) -> str:
    """Load the system prompt. Defaults to the bundled system_prompt.txt."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise EvaluationError(f"Failed to load system prompt: {exc}") from exc


def load_response_example(path: Path | None = None) -> str:
    """Load the example response shape shown to the model.

    Args:
        path: Path to the JSON example file.
              Defaults to the bundled response_example.json.

    Returns:
        The raw JSON string.

    Raises:
        EvaluationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "response_example.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EvaluationError(f"Failed to load response example: {exc}") from exc
