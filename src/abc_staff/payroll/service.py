from __future__ import annotations

import logging
import math
from typing import Optional

from ..common.validators import require_positive_number
from ..core.constants import DEFAULT_HOURLY_RATE
from ..stores.repository import StoreRepository

logger = logging.getLogger(__name__)


class HourlyRateResolver:
    """Resolve the hourly rate for a store, falling back to the statutory default.

    A missing store, a missing rate or a non-positive rate all fall back; this
    never raises for missing configuration.
    """

    def __init__(self, stores: StoreRepository, *, default_rate: float = DEFAULT_HOURLY_RATE):
        self._stores = stores
        self._default_rate = require_positive_number(default_rate, "default_rate")

    @property
    def default_rate(self) -> float:
        return self._default_rate

    def resolve(self, store_id: Optional[int]) -> float:
        if store_id is None:
            logger.info("No store on attendance record, using default hourly rate %s", self._default_rate)
            return self._default_rate

        store = self._stores.get_by_id(store_id)
        rate = store.default_hourly_rate if store else None
        if rate is None or not math.isfinite(rate) or rate <= 0:
            logger.info("Store %s has no hourly rate, using default %s", store_id, self._default_rate)
            return self._default_rate
        return float(rate)
