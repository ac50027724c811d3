"""
Run configuration for roadgraph.
A YAML file is validated into a RunConfig; missing keys take the model defaults
and unknown keys are rejected.
"""

import logging
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class RouteModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: str | None = None
    end: str | None = None


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    network_path: str | None = None  # None -> bundled sample network
    routes: list[RouteModel] = Field(default_factory=list)
    num_random_queries: int = Field(default=0, ge=0, strict=True)
    seed: int = 42
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("routes", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        # YAML "routes:" with nothing under it means no routes
        return [] if v is None else v


def load_config(path=None):
    if path is None:
        return RunConfig()
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping")
    return merge_config(data, source=path)


def merge_config(data, base=None, source="<config>"):
    """
    Validate `data` over `base` (defaults when None).

    Raises:
        ValueError: naming the source and every invalid field
    """
    merged = base.model_dump() if base is not None else {}
    merged.update(data)
    try:
        return RunConfig.model_validate(merged)
    except ValidationError as e:
        raise ValueError(f"{source}: invalid config\n{e}") from e


def configure_logging(level="WARNING"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
