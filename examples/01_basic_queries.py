"""Basic one-shot queries with querycore Driver."""

from __future__ import annotations

import logging
import sqlite3

from querycore import Driver, QueryException, SQLiteDialect, UnexpectedResultException


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # 1) Wrap a caller-owned connection.
    conn = sqlite3.connect(":memory:")
    driver = Driver(conn, SQLiteDialect())

    try:
        # 2) Create a table and insert rows.
        driver.simple_execute(
            'CREATE TABLE "users" ("id" INTEGER PRIMARY KEY, "email" TEXT, "team" TEXT);'
        )
        for email, team in [("alice@example.com", "red"), ("bob@example.com", "red"), ("carol@example.com", "blue")]:
            result = driver.simple_execute(
                'INSERT INTO "users" ("email", "team") VALUES (:email, :team);',
                {"email": email, "team": team},
            )
            print("Inserted id:", result.last_insert_id)

        # 3) List binds expand into IN (...) placeholders.
        rows = driver.simple_fetch(
            'SELECT * FROM "users" WHERE "id" IN (:ids) ORDER BY "id";', {"ids": [1, 3]}
        )
        print("By ids:", rows)

        # 4) Paging fragment.
        stub = driver.build_page_limits("email", "DESC", limit=2, page=0)
        print("First page:", driver.simple_fetch(f'SELECT "email" FROM "users" {stub};'))

        # 5) Single-row lookups.
        print("Carol:", driver.simple_fetch_one('SELECT * FROM "users" WHERE "team" = :team;', {"team": "blue"}))
        try:
            driver.simple_fetch_one('SELECT * FROM "users" WHERE "team" = :team;', {"team": "red"})
        except UnexpectedResultException as exc:
            print("Ambiguous lookup:", len(exc.rows), "rows")

        # 6) Driver failures arrive as QueryException.
        try:
            driver.simple_fetch('SELECT * FROM "users" WHERE "id" IN (:ids);', {"ids": []})
        except QueryException as exc:
            print("Query failed:", exc)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
