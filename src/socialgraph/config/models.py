"""The ``[network]`` table of socialgraph.toml.

Every key is optional; an empty file (or none at all) gives the defaults.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    """How edge-list tokens and CLI arguments become members."""

    model_config = {"frozen": True}

    member_type: Literal["str", "int"] = "str"
    # None splits on runs of whitespace.
    delimiter: str | None = Field(default=None, min_length=1)
