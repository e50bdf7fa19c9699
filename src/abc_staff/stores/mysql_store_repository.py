from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Store
from .repository import StoreRepository


class MySQLStoreRepository(StoreRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, store_id: int) -> Optional[Store]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT store_id, name, default_hourly_rate
                FROM stores
                WHERE store_id=%s
                """,
                (int(store_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            rate = r.get("default_hourly_rate")
            return Store(
                store_id=int(r["store_id"]),
                name=r["name"],
                default_hourly_rate=float(rate) if rate is not None else None,
            )
