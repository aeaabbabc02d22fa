"""Service for loading the starting board from taskdeck.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import Board, SeedConfig
from ..utils import IdFactory

logger = logging.getLogger(__name__)


class SeedService:
    """Service for loading and caching the seed configuration."""

    SEED_FILE = "taskdeck.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the seed service.

        Args:
            project_root: Directory containing taskdeck.yml
        """
        self.project_root = project_root
        self._config: SeedConfig | None = None
        self._config_error: str | None = None

    @property
    def seed_path(self) -> Path:
        """Full path to the seed file."""
        return self.project_root / self.SEED_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading the seed file."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the error message if any."""
        return self._config_error

    def get_config(self) -> SeedConfig:
        """Get seed configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def load_board(self, id_factory: IdFactory | None = None) -> Board:
        """Build the starting board from the seed configuration."""
        board = self.get_config().to_board(id_factory)
        logger.info(
            "Seed board loaded: %s",
            ", ".join(f"{column_id}={len(ids)}" for column_id, ids in board.layout().items()),
        )
        return board

    def _load_config(self) -> SeedConfig:
        """Load configuration from file or return default."""
        config_path = self.seed_path
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using default seed", self.SEED_FILE)
            return SeedConfig.default()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            return self._fallback(f"Invalid YAML in {self.SEED_FILE}: {e}")
        except OSError as e:
            return self._fallback(f"Cannot read {self.SEED_FILE}: {e}")

        if data is None:
            return self._fallback(f"{self.SEED_FILE} is empty")
        if not isinstance(data, dict):
            return self._fallback(f"{self.SEED_FILE} must contain a mapping")

        try:
            config = SeedConfig(**data)
        except ValidationError as e:
            return self._fallback(f"Error loading {self.SEED_FILE}: {e}")

        logger.info(
            "Loaded %s with %d seeded tasks",
            self.SEED_FILE,
            sum(len(col.tasks) for col in config.columns),
        )
        return config

    def _fallback(self, message: str) -> SeedConfig:
        """Record a load error and return the default seed."""
        self._config_error = message
        logger.warning(message)
        return SeedConfig.default()
