"""Report configuration per environment, with overrides from pyproject.toml."""

from dataclasses import dataclass, replace
from pathlib import Path

from salesreport.utils.io import load_toml_config

type ConfigDict = dict[str, str | int | bool]

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@dataclass(frozen=True)
class ReportConfig:
    max_rows: int
    is_nat_trade: bool
    is_supervisor: bool
    sales_path: Path
    report_data_path: Path
    output_dir: Path


def load_report_config(env: str = "production", pyproject: Path = PYPROJECT) -> ReportConfig:
    match env:
        case "production":
            base = Path("/data/sales")
            max_rows = 1000
        case "staging":
            base = Path("/data/staging/sales")
            max_rows = 1000
        case "development":
            base = Path("data")
            max_rows = 50
        case other:
            raise ValueError(f"Unknown environment: {other}")

    config = ReportConfig(
        max_rows=max_rows,
        is_nat_trade=True,
        is_supervisor=False,
        sales_path=base / "sales.csv",
        report_data_path=base / "report_data.csv",
        output_dir=base / "ecm",
    )
    return _apply_overrides(config, get_env_config(pyproject))


def _apply_overrides(config: ReportConfig, overrides: ConfigDict) -> ReportConfig:
    changes = {}
    for key, value in overrides.items():
        match key:
            case "max_rows":
                changes[key] = int(value)
            case "is_nat_trade" | "is_supervisor":
                changes[key] = bool(value)
            case "sales_path" | "report_data_path" | "output_dir":
                changes[key] = Path(value)
            case unknown:
                raise ValueError(f"Unknown report setting: {unknown}")
    return replace(config, **changes)


def get_env_config(pyproject: Path = PYPROJECT) -> ConfigDict:
    """Read report settings from the [tool.salesreport] table of pyproject.toml."""
    if not pyproject.exists():
        return {}
    data = load_toml_config(pyproject)
    return data.get("tool", {}).get("salesreport", {})
