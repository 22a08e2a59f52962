#!/usr/bin/env python3

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from coztrail.config import check_api_key, load_config
from coztrail.errors import ArgumentError, CoztrailError
from coztrail.gpt import DEFAULT_MODEL, complete
from coztrail.logging_setup import setup_logging
from coztrail.prompts import load_prompt


class ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors as ArgumentError so every failure exits with 1."""

    def error(self, message: str):
        raise ArgumentError(f"{self.format_usage()}{self.prog}: error: {message}")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = ArgumentParser(description="Send a prompt file to the chat API with the fixed system prompt and print the reply")
    parser.add_argument("prompt_path", nargs="?", help="Path to the file holding the user prompt")
    parser.add_argument("--model", default=DEFAULT_MODEL, help=f"Model name (default: {DEFAULT_MODEL})")
    parser.add_argument("--templates-dir", type=Path, default=None, help="Directory holding system_prompt.txt (default: templates/ next to this program)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> str:
    """Load prompt, check key, call the API; returns the reply text."""
    if not args.prompt_path:
        raise ArgumentError("Missing prompt file path")

    config = load_config(args.prompt_path, templates_dir=args.templates_dir, model=args.model)
    user_prompt = load_prompt(config.prompt_path)
    check_api_key(config)
    return complete(config, user_prompt)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_arguments(argv)
    except ArgumentError as e:
        print(e, file=sys.stderr)
        return 1
    setup_logging(args.verbose)

    try:
        result = run(args)
    except ArgumentError as e:
        print(e, file=sys.stderr)
        return 1
    except CoztrailError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(result)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
