"""Application settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

IdScheme = Literal["uuid", "sequential"]


class Settings(BaseSettings):
    """Application settings."""

    project_root: Path = Field(
        default=Path(),
        description="Directory containing taskdeck.yml",
    )

    id_scheme: IdScheme = Field(
        default="sequential",
        description="How new task ids are generated (sequential counter or uuid4)",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKDECK_",
    }
