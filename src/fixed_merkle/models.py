# models.py
# Data contracts for the Merkle tree and its demo runner.
# No business logic lives here, only schema and validation.

from typing import Any, Literal

from pydantic import BaseModel, Field


class Proof(BaseModel):
    """Authentication path for a single leaf, ordered leaf level first."""

    path_elements: list[Any] = Field(..., description="Sibling value at each level.")
    path_index: list[int] = Field(
        ..., description="0 if the node is the left child at that level, 1 if right."
    )


class TreeConfig(BaseModel):
    """Runtime settings for building a tree from the environment."""

    levels: int = Field(default=20, ge=0, description="Tree depth. Capacity is 2 << levels.")
    combiner: str = Field(default="sum", description="Name in the combiner registry.")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root logger level."
    )
