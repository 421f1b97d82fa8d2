from __future__ import annotations

import logging
from importlib.resources import files as resource_files
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


class WorldSettings(BaseModel):
    """Grid size and how many entities the generator scatters."""

    cols: int = Field(12, gt=0, description="Grid width in cells")
    rows: int = Field(8, gt=0, description="Grid height in cells")
    adversaries: int = Field(10, ge=0, description="Adversaries placed at generation")
    boosters: int = Field(4, ge=0, description="Boosters placed at generation")


class PlayerSettings(BaseModel):
    starting_vitality: int = Field(100, gt=0)
    starting_inventory: List[str] = Field(default_factory=lambda: ["Basic Sword", "Health Potion"])
    visit_range: int = Field(30, gt=0, description="Side of the square area tracked for visited cells")

    @field_validator("starting_inventory")
    @classmethod
    def strip_blank_items(cls, v: List[str]) -> List[str]:
        return [item.strip() for item in (v or []) if item and item.strip()]


class RuleSettings(BaseModel):
    """Combat and scoring constants used by the turn engine."""

    charge_kill_chance: float = Field(0.65, ge=0.0, le=1.0)
    strike_chance: float = Field(0.6, ge=0.0, le=1.0)
    shield_power_reduction: int = Field(15, ge=0)
    kill_reward: int = Field(50, gt=0)
    step_bonus: int = Field(5, gt=0)
    step_bonus_interval: int = Field(5, gt=0)


class EngineSettings(BaseModel):
    world: WorldSettings = Field(default_factory=WorldSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    rules: RuleSettings = Field(default_factory=RuleSettings)


def load_settings(path: Optional[Union[str, Path]] = None) -> EngineSettings:
    """Load engine settings from YAML.

    If path is None, loads the embedded default resource at
    tales_of_terminal/data/engine.yaml. Missing sections fall back to defaults.
    """
    if path is None:
        data = resource_files("tales_of_terminal.data").joinpath("engine.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded engine settings resource")
    else:
        try:
            data = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc
        logger.debug("Loaded engine settings from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Settings file is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Settings file must contain a mapping at the top level")

    try:
        settings = EngineSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid engine settings: {exc}") from exc
    logger.info(
        "Engine settings: grid=%dx%d adversaries=%d boosters=%d",
        settings.world.cols,
        settings.world.rows,
        settings.world.adversaries,
        settings.world.boosters,
    )
    return settings


__all__ = [
    "EngineSettings",
    "PlayerSettings",
    "RuleSettings",
    "WorldSettings",
    "load_settings",
]
