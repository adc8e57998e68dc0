from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class FrozenBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
