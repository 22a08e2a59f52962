"""
Loading of the user prompt and the executable-relative system prompt template.
"""
import sys
from pathlib import Path

from .errors import FileError


TEMPLATES_DIRNAME = "templates"
SYSTEM_PROMPT_FILENAME = "system_prompt.txt"


def _read_text(path: Path) -> str:
    # Bytes are decoded as-is: no newline translation, no stripping
    return path.read_bytes().decode("utf-8", errors="replace")


def load_prompt(path: Path) -> str:
    """Read the whole prompt file given on the command line."""
    try:
        return _read_text(Path(path))
    except OSError as e:
        raise FileError(f"failed to load prompt: {e}", path=Path(path)) from e


def executable_dir() -> Path:
    """
    Directory holding the running program, independent of the working directory.

    Raises:
        FileError: if the program path is not known (e.g. an embedded interpreter)
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        raise FileError("failed to load system prompt: cannot resolve executable path")
    return Path(argv0).resolve().parent


def default_template_dir() -> Path:
    return executable_dir() / TEMPLATES_DIRNAME


def load_system_prompt(template_dir: Path) -> str:
    """Read the fixed system prompt from <template_dir>/system_prompt.txt."""
    path = Path(template_dir) / SYSTEM_PROMPT_FILENAME
    try:
        return _read_text(path)
    except OSError as e:
        raise FileError(f"failed to load system prompt: {e}", path=path) from e
