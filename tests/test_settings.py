"""Settings parsing tests."""

from pathlib import Path

import pytest

from ops_board.application.trend import DateRange
from ops_board.settings import Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.top_n == 5
        assert settings.date_range is DateRange.LAST_30_DAYS
        assert settings.seed is None
        assert settings.output_dir == Path("output")

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "OPS_BOARD_TOP_N": "3",
                "OPS_BOARD_DATE_RANGE": "YTD",
                "OPS_BOARD_SEED": "42",
                "OPS_BOARD_OUTPUT_DIR": "reports",
            }
        )

        assert settings.top_n == 3
        assert settings.date_range is DateRange.YEAR_TO_DATE
        assert settings.seed == 42
        assert settings.output_dir == Path("reports")

    @pytest.mark.parametrize(
        "env",
        [
            {"OPS_BOARD_TOP_N": "many"},
            {"OPS_BOARD_TOP_N": "0"},
            {"OPS_BOARD_DATE_RANGE": "14d"},
            {"OPS_BOARD_SEED": "abc"},
        ],
    )
    def test_invalid_values(self, env):
        with pytest.raises(ValueError):
            Settings.from_env(env)
