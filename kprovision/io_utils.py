import logging
import sys
from pathlib import Path

import yaml
from colorama import Fore, Style

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level=logging.WARNING):
    """Console logging for the kprovision logger tree."""
    logger = logging.getLogger("kprovision")
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)
    return logger


def dump_yaml_multi(documents):
    return [yaml.safe_dump(d, sort_keys=False).rstrip() for d in documents]


def render_manifests(steps):
    return "\n---\n".join(dump_yaml_multi([s.body() for s in steps])) + "\n"


def write_manifests(steps, path: Path):
    path.write_text(render_manifests(steps), encoding="utf-8")
    return path


def print_error(message, stream=None):
    print(Fore.RED + message + Style.RESET_ALL, file=stream or sys.stderr)
