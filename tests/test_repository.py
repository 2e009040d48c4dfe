from __future__ import annotations

import sqlite3
import unittest
from typing import Optional

from querycore import Driver, Repository, SQLiteDialect
from querycore.core.types import MaybeRow, Rows


class UserRepository(Repository):
    def add(self, email: str, team: str) -> int:
        return self._execute(
            'INSERT INTO "users" ("email", "team") VALUES (:email, :team);',
            {"email": email, "team": team},
        ).last_insert_id

    def add_many(self, emails: list[str], team: str) -> int:
        with self.driver.transaction():
            self.driver.prepare(
                'INSERT INTO "users" ("email", "team") VALUES (:email, :team);', "bulk"
            )
            for email in emails:
                self.driver.execute({"email": email, "team": team}, "bulk")
            self.driver.clear("bulk")
        return len(emails)

    def by_email(self, email: str) -> MaybeRow:
        return self._fetch_one('SELECT * FROM "users" WHERE "email" = :email;', {"email": email})

    def by_ids(self, ids: list[int]) -> Rows:
        return self._fetch('SELECT * FROM "users" WHERE "id" IN (:ids) ORDER BY "id";', {"ids": ids})

    def list_page(self, limit: int, page: Optional[int] = None) -> Rows:
        stub = self._page("email", "ASC", limit, page)
        return self._fetch(f'SELECT "email" FROM "users" {stub};')


class RepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.conn = sqlite3.connect(":memory:")
        self.driver = Driver(self.conn, SQLiteDialect())
        self.driver.simple_execute(
            'CREATE TABLE "users" ("id" INTEGER PRIMARY KEY, "email" TEXT, "team" TEXT);'
        )
        self.repo = UserRepository(self.driver)

    def tearDown(self) -> None:
        self.conn.close()

    def test_repository_keeps_driver(self) -> None:
        self.assertIs(self.repo.driver, self.driver)

    def test_repository_helpers_run_through_driver(self) -> None:
        ids = [self.repo.add(f"{name}@example.com", "red") for name in ("c", "a", "b")]

        self.assertEqual(ids, [1, 2, 3])
        self.assertEqual(self.repo.by_email("a@example.com")["id"], 2)
        self.assertIsNone(self.repo.by_email("z@example.com"))
        self.assertEqual([row["id"] for row in self.repo.by_ids([1, 3])], [1, 3])

    def test_repository_uses_statement_slots_in_transaction(self) -> None:
        self.repo.add("first@example.com", "blue")

        added = self.repo.add_many(["x@example.com", "y@example.com"], "red")

        self.assertEqual(added, 2)
        self.assertEqual(len(self.repo.by_ids([1, 2, 3])), 3)
        self.assertNotIn("bulk", self.driver.statements)

    def test_repository_paging(self) -> None:
        for name in ("d", "a", "c", "b", "e"):
            self.repo.add(f"{name}@example.com", "red")

        first = self.repo.list_page(2)
        second = self.repo.list_page(2, 1)

        self.assertEqual([row["email"][0] for row in first], ["a", "b"])
        self.assertEqual([row["email"][0] for row in second], ["c", "d"])


if __name__ == "__main__":
    unittest.main()
