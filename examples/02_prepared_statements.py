"""Prepared statement slots and transactions with querycore Driver."""

from __future__ import annotations

import sqlite3

from querycore import Driver, SQLiteDialect


def main() -> None:
    conn = sqlite3.connect(":memory:", isolation_level=None)
    driver = Driver(conn, SQLiteDialect())

    try:
        driver.simple_execute('CREATE TABLE "events" ("id" INTEGER PRIMARY KEY, "kind" TEXT, "seen" INTEGER);')

        # 1) Bulk insert reusing one prepared statement.
        with driver.transaction():
            driver.prepare('INSERT INTO "events" ("kind", "seen") VALUES (:kind, 0);', "insert")
            for kind in ("click", "view", "click", "scroll"):
                driver.execute({"kind": kind}, "insert")
            driver.clear("insert")

        # 2) Interleave a read slot and a write slot.
        driver.prepare('SELECT "id" FROM "events" WHERE "kind" = :kind;', "read")
        driver.prepare('UPDATE "events" SET "seen" = 1 WHERE "id" = :id;', "write")
        for row in driver.fetch({"kind": "click"}, "read"):
            print("Marked:", driver.execute({"id": row["id"]}, "write").row_count)

        print("Events:", driver.simple_fetch('SELECT * FROM "events" ORDER BY "id";'))
    finally:
        conn.close()


if __name__ == "__main__":
    main()
