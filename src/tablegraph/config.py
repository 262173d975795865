import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_INPUT = os.getenv("TABLEGRAPH_INPUT", "tables.csv")
DEFAULT_OUTPUT = os.getenv("TABLEGRAPH_OUTPUT", "graph")
DEFAULT_TYPE = os.getenv("TABLEGRAPH_TYPE", "graphviz")
DEFAULT_LOG_LEVEL = os.getenv("TABLEGRAPH_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; ``verbose`` forces DEBUG."""
    level = logging.DEBUG if verbose else getattr(logging, DEFAULT_LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
