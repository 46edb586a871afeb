import json
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from orders_analyzer.analysis.daily_sales import DatePolicy

DEFAULT_CONFIG_FILE = "analyzer_config.json"


def load_analyzer_config(config_path: str | None = None) -> dict[str, Any]:
    """
    Read the analyzer settings file as a dict.

    ``config_path`` overrides the analyzer_config.json shipped with the
    package. Raises TypeError when the file holds anything but a JSON object.
    """
    if config_path is None:
        # Packaged defaults: source.txt, truncate policy, local zone
        final_path = Path(__file__).parent / DEFAULT_CONFIG_FILE
    else:
        final_path = Path(config_path)

    with open(final_path, encoding="utf-8") as f:
        settings = json.load(f)
    if not isinstance(settings, dict):
        raise TypeError(
            f"{final_path} must hold a JSON object, got {type(settings).__name__}"
        )
    return settings


def _zone(name: str | None) -> tzinfo | None:
    # null keeps the local system zone
    if name is None:
        return None
    return ZoneInfo(name)


@dataclass
class AnalyzerSettings:
    """Typed view of analyzer_config.json."""

    source_path: Path = Path("source.txt")
    date_policy: DatePolicy = DatePolicy.TRUNCATE
    source_timezone: tzinfo | None = None
    report_timezone: tzinfo | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "AnalyzerSettings":
        policy = config.get("date_policy", DatePolicy.TRUNCATE.value)
        try:
            date_policy = DatePolicy(policy)
        except ValueError:
            choices = ", ".join(p.value for p in DatePolicy)
            raise ValueError(
                f"Unknown date_policy {policy!r} (expected one of: {choices})"
            ) from None

        return cls(
            source_path=Path(config.get("source_path", "source.txt")),
            date_policy=date_policy,
            source_timezone=_zone(config.get("source_timezone")),
            report_timezone=_zone(config.get("report_timezone")),
            log_level=str(config.get("log_level", "WARNING")).upper(),
        )
