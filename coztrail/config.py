"""Run configuration, resolved once at start-up from arguments and the environment."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ApiKeyMissingError
from .gpt import API_BASE_URL, DEFAULT_MODEL
from .models import RunConfig
from .prompts import default_template_dir


API_KEY_ENV = "OPENAI_API_KEY"


def load_config(
    prompt_path: Path,
    templates_dir: Optional[Path] = None,
    model: str = DEFAULT_MODEL,
    base_url: str = API_BASE_URL,
) -> RunConfig:
    """Build the RunConfig, reading the API key from env or a .env file.

    The key may come back empty; check_api_key enforces it.
    """
    load_dotenv()
    return RunConfig(
        prompt_path=Path(prompt_path),
        api_key=os.getenv(API_KEY_ENV) or "",
        template_dir=Path(templates_dir) if templates_dir else default_template_dir(),
        model=model,
        base_url=base_url,
    )


def check_api_key(config: RunConfig) -> None:
    if not config.api_key:
        raise ApiKeyMissingError(
            f"{API_KEY_ENV} is not set. Add it to your environment or .env file.",
            variable=API_KEY_ENV,
        )
