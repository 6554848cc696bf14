"""Option errors compare and hash by value."""

from __future__ import annotations

import unittest

from exview.options.errors import (
    BadArgument,
    EmptyCustomFormat,
    FailedParse,
    Useless,
    Useless2,
)
from exview.options.lookup import EnvSource, FlagSource


class ErrorValueTests(unittest.TestCase):
    def test_equal_errors_hash_equal(self) -> None:
        pairs = (
            (Useless("inode", False, "long"), Useless("inode", False, "long")),
            (Useless2("level", "recurse", "tree"), Useless2("level", "recurse", "tree")),
            (BadArgument("time", "later"), BadArgument("time", "later")),
            (EmptyCustomFormat(recent=True), EmptyCustomFormat(recent=True)),
            (
                FailedParse("x", EnvSource("COLUMNS"), ValueError("invalid digit found in 'x'")),
                FailedParse("x", EnvSource("COLUMNS"), ValueError("invalid digit found in 'x'")),
            ),
        )
        for first, second in pairs:
            with self.subTest(error=first):
                self.assertEqual(first, second)
                self.assertEqual(hash(first), hash(second))

    def test_errors_dedupe_in_a_set(self) -> None:
        errors = {
            Useless("inode", False, "long"),
            Useless("inode", False, "long"),
            Useless("inode", True, "long"),
            BadArgument("time", "later"),
        }

        self.assertEqual(len(errors), 3)

    def test_failed_parse_differs_by_source(self) -> None:
        error = ValueError("invalid digit found in 'x'")

        self.assertNotEqual(
            FailedParse("x", EnvSource("COLUMNS"), error),
            FailedParse("x", FlagSource("width"), error),
        )

    def test_errors_are_raisable(self) -> None:
        with self.assertRaises(Useless) as exc_info:
            raise Useless("git", False, "long")

        self.assertEqual(str(exc_info.exception), "Option --git is useless without option --long")


if __name__ == "__main__":
    unittest.main()
