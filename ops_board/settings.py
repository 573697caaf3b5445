"""Runtime settings for the reporting entry point, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from ops_board.application.trend import DateRange

DEFAULT_TOP_N = 5
DEFAULT_DATE_RANGE = DateRange.LAST_30_DAYS
DEFAULT_OUTPUT_DIR = "output"


def _parse_top_n(env: Mapping[str, str]) -> int:
    raw = env.get("OPS_BOARD_TOP_N", str(DEFAULT_TOP_N))
    try:
        top_n = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid OPS_BOARD_TOP_N: {raw}") from exc
    if top_n < 1:
        raise ValueError(f"OPS_BOARD_TOP_N must be >= 1, got {top_n}")
    return top_n


def _parse_date_range(env: Mapping[str, str]) -> DateRange:
    raw = env.get("OPS_BOARD_DATE_RANGE", DEFAULT_DATE_RANGE.value)
    try:
        return DateRange(raw.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in DateRange)
        raise ValueError(f"Invalid OPS_BOARD_DATE_RANGE: {raw} (expected one of {allowed})") from exc


def _parse_seed(env: Mapping[str, str]) -> int | None:
    raw = env.get("OPS_BOARD_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid OPS_BOARD_SEED: {raw}") from exc


@dataclass(frozen=True)
class Settings:
    top_n: int = DEFAULT_TOP_N
    date_range: DateRange = DEFAULT_DATE_RANGE
    seed: int | None = None
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        source = os.environ if env is None else env
        return cls(
            top_n=_parse_top_n(source),
            date_range=_parse_date_range(source),
            seed=_parse_seed(source),
            output_dir=Path(source.get("OPS_BOARD_OUTPUT_DIR", DEFAULT_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR),
        )
