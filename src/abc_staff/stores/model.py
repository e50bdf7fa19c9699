from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Store:
    """Domain entity: a franchise store employing staff."""

    store_id: int
    name: str
    default_hourly_rate: Optional[float] = None
