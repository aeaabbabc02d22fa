"""Generate command for writing the default seed file."""

import logging
from pathlib import Path

import yaml

from ..models import COLUMN_IDS, SeedConfig
from ..services.seed_service import SeedService
from .output import error, info, success

logger = logging.getLogger(__name__)

SEED_HEADER = f"""\
# taskdeck starting board
#
# Loaded once at startup; board changes are not written back.
#
# Columns are fixed: {", ".join(COLUMN_IDS)}
#   - title: optional display label
#   - tasks: listed top to bottom
#
# Tasks:
#   - title: required, surrounding whitespace is trimmed
#   - id: optional, unique across the board; assigned on load when omitted
#   - description: optional
#   - due_date: optional, YYYY-MM-DD or dd/mm/yy

"""


def generate_seed_yaml() -> str:
    """Serialize SeedConfig.default() as commented YAML."""
    config_dict = SeedConfig.default().model_dump(mode="json")

    # Drop empty optional fields to keep the file readable
    for col in config_dict["columns"]:
        for task in col["tasks"]:
            if not task.get("description"):
                task.pop("description", None)
            if task.get("due_date") is None:
                task.pop("due_date", None)

    yaml_content = yaml.dump(config_dict, default_flow_style=False, sort_keys=False)
    return SEED_HEADER + yaml_content


def run_generate(project_root: Path) -> int:
    """
    Write the default taskdeck.yml.

    Returns:
        Exit code (0 = written, 1 = file already exists or cannot be written)
    """
    seed_path = project_root / SeedService.SEED_FILE

    if seed_path.exists():
        info(f"Seed file exists: {seed_path}")
        return 1

    try:
        project_root.mkdir(parents=True, exist_ok=True)
        seed_path.write_text(generate_seed_yaml())
    except OSError as e:
        logger.error("Failed to write %s: %s", seed_path, e)
        error(f"Cannot write {seed_path}: {e}")
        return 1

    success(f"Generated seed file: {seed_path}")
    return 0
