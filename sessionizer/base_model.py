"""
Pydantic base for the launch models.

ProjectCandidate and LaunchPlan are built once per run and only read
afterwards, so they are frozen and validated strictly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Immutable model that rejects unknown fields and coerced types."""

    model_config = ConfigDict(
        extra='forbid',
        strict=True,  # Path fields need real Path objects
        frozen=True,
    )
