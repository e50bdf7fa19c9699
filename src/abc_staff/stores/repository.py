from __future__ import annotations

from typing import Optional, Protocol

from .model import Store


class StoreRepository(Protocol):
    def get_by_id(self, store_id: int) -> Optional[Store]:
        raise NotImplementedError
