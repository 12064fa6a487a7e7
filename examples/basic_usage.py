# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Guard every method of a database connection class.

Run with ``python -m examples.basic_usage``.
"""

from __future__ import annotations

import random
from typing import Any

from disposeguard import ObjectDisposedException, create
from disposeguard.core.config import Config
from disposeguard.logging import StructlogAdapter

_adapter = StructlogAdapter()
logger = _adapter.get_logger("examples.basic_usage")


class DatabaseConnection:
    def __init__(self, connection_string: str) -> None:
        self.connection_string = connection_string
        self.is_connected = True
        self._disposed = False

    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if not self._disposed:
            self.is_connected = False
            self._disposed = True
            logger.info("connection disposed", url=self.connection_string)

    def query(self, sql: str) -> dict[str, Any]:
        logger.info("executing query", sql=sql)
        return {"results": [{"id": 1, "name": "John"}]}

    def insert(self, table: str, data: dict[str, Any]) -> dict[str, int]:
        logger.info("inserting row", table=table, data=data)
        return {"insert_id": random.randint(0, 999)}

    def close(self) -> None:
        self.dispose()


def guard_all(cls: type) -> type:
    """Replace every function defined on *cls* with its guarded version."""
    for name, value in list(vars(cls).items()):
        guarded = create(name, value)
        if guarded is not value:
            setattr(cls, name, guarded)
    return cls


guard_all(DatabaseConnection)


def main() -> None:
    _adapter.configure(Config({}))
    db = DatabaseConnection("postgresql://localhost:5432/mydb")

    logger.info("query result", result=db.query("SELECT * FROM users"))
    logger.info("insert result", result=db.insert("users", {"name": "Alice"}))

    db.dispose()

    for attempt in (lambda: db.query("SELECT * FROM users"), lambda: db.insert("users", {"name": "Bob"})):
        try:
            attempt()
        except ObjectDisposedException as exc:
            logger.info("expected error", error=str(exc))

    logger.info("disposal state", disposed=db.is_disposed())


if __name__ == "__main__":
    main()
