"""Shared utilities for the org audit pipeline."""

from orgaudit.utils.io import read_text_csv, read_properties_file, load_toml_config, load_yaml_config
from orgaudit.utils.validators import validate_dataframe, validate_unique
from orgaudit.utils.types import HierarchySummary, OutputFormat
