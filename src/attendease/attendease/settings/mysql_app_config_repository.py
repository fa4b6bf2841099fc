from __future__ import annotations

from typing import Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import AppConfigRepository


class MySQLAppConfigRepository(AppConfigRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_all(self) -> dict[str, str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT config_key, config_value FROM app_config")
            return {r["config_key"]: r["config_value"] for r in fetchall(cur)}

    def upsert_many(self, values: Mapping[str, str]) -> None:
        if not values:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO app_config(config_key, config_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE config_value=VALUES(config_value)
                """,
                [(key, str(value)) for key, value in values.items()],
            )
