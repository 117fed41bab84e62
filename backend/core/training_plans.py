"""
Training plan seed data.

The seeded plans ship as a YAML dictionary alongside the code and are
validated through the TrainingPlan model before being written to the store.
"""
import logging
import pathlib
from typing import Any, Dict, List, Optional, Union

import yaml

from application.ports import TrainingPlanRepository
from domain.models import TrainingPlan

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]

SEED_PLANS_PATH = ROOT / "shared/dictionaries/training_plans.yaml"


def load_seed_plans(path: Optional[Union[str, pathlib.Path]] = None) -> List[Dict[str, Any]]:
    """
    Load and validate training plans from a YAML file.

    Args:
        path: YAML file with a top-level list of plans (defaults to the bundled seed)

    Returns:
        Plan dictionaries ready for the repository

    Raises:
        ValueError: If the file isn't a list or a plan fails validation
    """
    path = pathlib.Path(path) if path else SEED_PLANS_PATH
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a list of plans")

    plans = [TrainingPlan.model_validate(item).model_dump(mode="json") for item in raw]

    ids = [p["id"] for p in plans]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate plan ids in {path}: {', '.join(duplicates)}")

    return plans


def seed_training_plans(
    repo: TrainingPlanRepository,
    path: Optional[Union[str, pathlib.Path]] = None,
) -> int:
    """
    Write the seed plans to the store.

    Safe to run repeatedly: plans are upserted by id.

    Returns:
        Number of plans written
    """
    plans = load_seed_plans(path)
    written = repo.upsert_plans(plans)
    logger.info(f"Seeded {written} training plans from {path or SEED_PLANS_PATH}")
    return written
