"""File I/O utilities for reading source frames and writing report documents."""

import tomllib
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

console = Console()


def read_csv_file(path: FilePath, **read_kwargs) -> pd.DataFrame:
    """Read a single CSV source, failing loudly when it is missing."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")

    console.print(f"  Reading {path.name} ({path.stat().st_size / 1024:.0f} KB)")
    return pd.read_csv(path, **read_kwargs)


def write_text_output(content: str, path: FilePath) -> Path:
    """Write a text document, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    console.print(f"  Wrote {len(content):,} characters to {path}")
    return path


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)
