from __future__ import annotations

import logging
from pathlib import Path

import yaml

from pingmon.config import settings
from pingmon.models import TargetList

logger = logging.getLogger(__name__)

DEFAULT_TARGETS: tuple[str, ...] = (
    "google.com",
    "https://todoappdb-kaushiksahu18.onrender.com/",
    "https://theconnect-fa2u.onrender.com/",
)


def load_target_file(path: Path) -> TargetList:
    if not path.exists():
        raise FileNotFoundError(f"Missing targets file at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    reg = TargetList.model_validate(data)

    # Ensure unique targets
    seen = set()
    for target in reg.targets:
        if target in seen:
            raise ValueError(f"Duplicate target: {target}")
        seen.add(target)

    return reg


def resolve_targets(
    env_targets: tuple[str, ...] | None = None,
    path: Path | None = None,
) -> list[str]:
    """
    Pick the target list: explicit env list first, then the YAML file when
    it exists, then the built-in defaults.
    """
    if env_targets is None:
        env_targets = settings.PINGMON_TARGETS
    if path is None:
        path = Path(settings.PINGMON_TARGETS_PATH)

    if env_targets:
        return list(env_targets)
    if path.exists():
        logger.info("Loading targets from %s", path)
        return load_target_file(path).targets
    return list(DEFAULT_TARGETS)
