"""Stderr logging setup; stdout is reserved for the model reply."""
import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    root = logging.getLogger("coztrail")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.handlers[:] = [handler]
    root.propagate = False
