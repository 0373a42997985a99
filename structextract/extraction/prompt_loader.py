from pathlib import Path

from structextract.config.exceptions import ConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_instructions(path: Path | None = None) -> str:
    """Load the extraction instruction text from a file.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled extraction_prompt.txt.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to load extraction instructions: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the response JSON schema from a file.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled extraction_schema.json.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to load extraction schema: {exc}") from exc
