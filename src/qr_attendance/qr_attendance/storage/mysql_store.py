from __future__ import annotations

import json
from typing import Any, Optional, Sequence, Tuple

from ..core.enums import Collection
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .store import KeyValueStore, Mutation, T


def _decode(raw: Optional[str]) -> Optional[Any]:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise StorageError("Stored value is not valid JSON") from e


class MySQLKeyValueStore(KeyValueStore):
    """Key-value store on the ``kv_entries`` table.

    ``mutate`` locks the row with SELECT ... FOR UPDATE, so read-modify-write
    cycles on one key are serialised across processes while different keys
    proceed in parallel.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, collection: Collection, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT value_json FROM kv_entries WHERE collection=%s AND entry_key=%s",
                (Collection(collection).value, key),
            )
            r = fetchone(cur)
            return _decode(r["value_json"]) if r else None

    def items(self, collection: Collection) -> Sequence[Tuple[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT entry_key, value_json
                FROM kv_entries
                WHERE collection=%s AND value_json IS NOT NULL
                ORDER BY entry_id ASC
                """,
                (Collection(collection).value,),
            )
            return [(r["entry_key"], _decode(r["value_json"])) for r in fetchall(cur)]

    def put(self, collection: Collection, key: str, value: Any) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_entries(collection, entry_key, value_json)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE value_json=VALUES(value_json), version=version+1
                """,
                (Collection(collection).value, key, json.dumps(value, ensure_ascii=False)),
            )

    def delete(self, collection: Collection, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM kv_entries WHERE collection=%s AND entry_key=%s AND value_json IS NOT NULL",
                (Collection(collection).value, key),
            )
            return cur.rowcount > 0

    def mutate(self, collection: Collection, key: str, fn: Mutation[T]) -> T:
        name = Collection(collection).value
        with db_cursor(self._conn_factory) as (_, cur):
            # Placeholder row so there is always something to lock.
            cur.execute(
                "INSERT IGNORE INTO kv_entries(collection, entry_key, value_json) VALUES(%s,%s,NULL)",
                (name, key),
            )
            cur.execute(
                "SELECT value_json FROM kv_entries WHERE collection=%s AND entry_key=%s FOR UPDATE",
                (name, key),
            )
            r = fetchone(cur)
            current = _decode(r["value_json"]) if r else None

            new_value, outcome = fn(json.loads(json.dumps(current)))
            if new_value != current:
                cur.execute(
                    """
                    UPDATE kv_entries
                    SET value_json=%s, version=version+1
                    WHERE collection=%s AND entry_key=%s
                    """,
                    (None if new_value is None else json.dumps(new_value, ensure_ascii=False), name, key),
                )
            return outcome
