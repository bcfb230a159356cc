"""Shared utilities for the sales report package."""

from salesreport.utils.io import read_csv_file, write_text_output, load_toml_config
from salesreport.utils.validators import validate_dataframe, validate_required_columns
