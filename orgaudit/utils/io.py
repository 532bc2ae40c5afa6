"""File I/O utilities for reading roster and configuration files."""

import logging
import tomllib
from pathlib import Path

import pandas as pd
import yaml

from orgaudit.utils.types import FilePath

logger = logging.getLogger(__name__)

# latin-1 decodes any byte sequence, so it is the final fallback.
_STRICT_ENCODINGS = ("utf-8", "cp1252")
_FALLBACK_ENCODING = "latin-1"


def _read_positional_csv(path: Path, names: list[str], encoding: str) -> pd.DataFrame:
    return pd.read_csv(
        path,
        header=None,
        skiprows=1,
        names=names,
        index_col=False,
        dtype=str,
        encoding=encoding,
        keep_default_na=False,
        na_values=[""],
        skipinitialspace=True,
    )


def read_text_csv(path: FilePath, names: list[str]) -> pd.DataFrame:
    """Read a CSV by column position with every column as text.

    The header line is skipped whatever it says and ``names`` are used
    instead; trailing columns missing from a row become nulls. Only empty
    cells become nulls so names such as ``NA`` survive. A zero-byte file
    yields an empty frame.
    """
    path = Path(path)
    try:
        for encoding in _STRICT_ENCODINGS:
            try:
                return _read_positional_csv(path, names, encoding)
            except UnicodeDecodeError:
                logger.warning("Could not decode %s as %s, retrying", path.name, encoding)
        return _read_positional_csv(path, names, _FALLBACK_ENCODING)
    except pd.errors.EmptyDataError:
        logger.warning("File %s is empty", path.name)
        return pd.DataFrame(columns=names)


def read_properties_file(path: FilePath) -> dict[str, str]:
    """Read a Java-style ``key=value`` properties file."""
    values: dict[str, str] = {}
    with open(path, encoding="utf-8") as f:
        for raw_line in f:
            line = raw_line.strip()
            match line:
                case "":
                    continue
                case comment if comment.startswith(("#", "!")):
                    continue
                case _:
                    key, sep, value = line.partition("=")
                    if not sep:
                        key, _, value = line.partition(":")
                    values[key.strip()] = value.strip()
    return values


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_yaml_config(path: FilePath) -> dict:
    with open(path) as f:
        return yaml.safe_load(f) or {}
