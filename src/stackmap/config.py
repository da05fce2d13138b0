"""
Project configuration.

Settings live in ``.stackmap/config.yaml``. Any key left out of the file
keeps its default, so a partial file is valid:

    catalog:
      path: .stackmap/seed.json
    search:
      cap: 12
    rules:
      default_rule_id: R2
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import ConfigError
from .rules.engine import BUILDER_KEYWORDS, BUILDER_LABEL, DEFAULT_RULE_ID, ScoringWeights
from .rules.prompts import STACK_PLACEHOLDER

logger = logging.getLogger(__name__)

CONFIG_DIR = ".stackmap"
CONFIG_FILE = "config.yaml"
DEFAULT_CATALOG_PATH = f"{CONFIG_DIR}/seed.json"


class CatalogSettings(BaseModel):
    path: str = DEFAULT_CATALOG_PATH


class GraphSettings(BaseModel):
    initial_level: int = Field(default=1, ge=0)


class SearchSettings(BaseModel):
    cap: int = Field(default=12, ge=1)
    min_query_length: int = Field(default=2, ge=1)


class RuleSettings(BaseModel):
    default_rule_id: str = DEFAULT_RULE_ID
    builder_keywords: List[str] = Field(default_factory=lambda: list(BUILDER_KEYWORDS))
    builder_label: str = BUILDER_LABEL
    weights: ScoringWeights = Field(default_factory=ScoringWeights)


class PromptSettings(BaseModel):
    stack_placeholder: str = STACK_PLACEHOLDER


class StackmapConfig(BaseModel):
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    rules: RuleSettings = Field(default_factory=RuleSettings)
    prompts: PromptSettings = Field(default_factory=PromptSettings)

    model_config = ConfigDict(extra="ignore")

    def to_yaml_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def config_path(root_dir: Optional[Path] = None) -> Path:
    return (root_dir or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> StackmapConfig:
    """
    Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigError: The file exists but is not valid YAML or fails validation.
    """
    path = path or config_path()
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return StackmapConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), "top-level YAML value must be a mapping")

    try:
        return StackmapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(path), f"{e.error_count()} validation error(s)") from e


def write_config(config: StackmapConfig, path: Optional[Path] = None) -> Path:
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_yaml_dict(), f, sort_keys=False, default_flow_style=False)
    return path
