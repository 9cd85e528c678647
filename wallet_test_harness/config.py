"""Configuration for a harness run."""

from collections.abc import Sequence
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from wallet_test_harness.models.log import LogLevel

type SuiteKey = Literal["comprehensive", "edge-cases"]


class HarnessConfig(BaseModel):
    """Configuration for a harness run."""

    suites: Sequence[SuiteKey] = Field(
        default=("comprehensive",), min_length=1, description="Suites to run, in order"
    )
    topic_id: str | None = Field(
        default=None, description="Topic for topic cases (skipped when missing)"
    )
    min_log_level: LogLevel = Field(
        default="info", description="Lowest level echoed to the console"
    )
    report_path: Path | None = Field(
        default=None, description="Where to write the Markdown report"
    )
    log_path: Path | None = Field(
        default=None, description="Where to write the JSON log export"
    )
