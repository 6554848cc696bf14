"""Environment lookups, fallback key pairs and precedence chains."""

from __future__ import annotations

import sys
import unittest

from exview.options.errors import FailedParse
from exview.options.lookup import (
    EnvSource,
    FlagSource,
    Lookup,
    env,
    env_pair,
    first_match,
    flag,
    parse_count,
    parse_signed,
    parse_unsigned,
)
from exview.options.vars import ChainedVars, EnvironVars, MappingVars


class VarsTests(unittest.TestCase):
    def test_mapping_vars_set_and_unset(self) -> None:
        vars = MappingVars()
        vars.set("TIME_STYLE", "iso")
        self.assertEqual(vars.get("TIME_STYLE"), "iso")

        vars.unset("TIME_STYLE")
        vars.unset("TIME_STYLE")
        self.assertIsNone(vars.get("TIME_STYLE"))

    def test_fallback_prefers_primary(self) -> None:
        vars = MappingVars({"EZA_GRID_ROWS": "1", "EXA_GRID_ROWS": "2"})

        self.assertEqual(vars.get_with_fallback("EZA_GRID_ROWS", "EXA_GRID_ROWS"), "1")
        self.assertEqual(vars.source("EZA_GRID_ROWS", "EXA_GRID_ROWS"), "EZA_GRID_ROWS")

    def test_fallback_uses_secondary(self) -> None:
        vars = MappingVars({"EXA_GRID_ROWS": "2"})

        self.assertEqual(vars.get_with_fallback("EZA_GRID_ROWS", "EXA_GRID_ROWS"), "2")
        self.assertEqual(vars.source("EZA_GRID_ROWS", "EXA_GRID_ROWS"), "EXA_GRID_ROWS")

    def test_empty_primary_still_wins(self) -> None:
        vars = MappingVars({"EZA_GRID_ROWS": "", "EXA_GRID_ROWS": "2"})

        self.assertEqual(vars.get_with_fallback("EZA_GRID_ROWS", "EXA_GRID_ROWS"), "")

    def test_source_is_none_when_both_unset(self) -> None:
        self.assertIsNone(MappingVars().source("EZA_GRID_ROWS", "EXA_GRID_ROWS"))

    def test_environ_vars_reads_injected_mapping(self) -> None:
        vars = EnvironVars({"COLUMNS": "100"})

        self.assertEqual(vars.get("COLUMNS"), "100")
        self.assertIsNone(vars.get("TIME_STYLE"))

    def test_chained_vars_first_layer_wins(self) -> None:
        vars = ChainedVars(
            MappingVars({"TIME_STYLE": "iso"}),
            MappingVars({"TIME_STYLE": "relative", "COLUMNS": "60"}),
        )

        self.assertEqual(vars.get("TIME_STYLE"), "iso")
        self.assertEqual(vars.get("COLUMNS"), "60")
        self.assertIsNone(vars.get("EZA_STRICT"))


class LookupChainTests(unittest.TestCase):
    def test_first_match_short_circuits(self) -> None:
        calls: list[str] = []

        def tracked(name: str):
            def strategy():
                calls.append(name)
                return Lookup(name, FlagSource(name))

            return strategy

        found = first_match(tracked("a"), tracked("b"))

        self.assertEqual(found, Lookup("a", FlagSource("a")))
        self.assertEqual(calls, ["a"])

    def test_flag_then_env(self) -> None:
        vars = MappingVars({"TIME_STYLE": "iso"})

        self.assertEqual(
            first_match(flag("time-style", None), env(vars, "TIME_STYLE")),
            Lookup("iso", EnvSource("TIME_STYLE")),
        )
        self.assertEqual(
            first_match(flag("time-style", "relative"), env(vars, "TIME_STYLE")),
            Lookup("relative", FlagSource("time-style")),
        )

    def test_env_skip_empty(self) -> None:
        vars = MappingVars({"TIME_STYLE": ""})

        self.assertIsNone(first_match(env(vars, "TIME_STYLE", skip_empty=True)))
        self.assertEqual(first_match(env(vars, "TIME_STYLE")), Lookup("", EnvSource("TIME_STYLE")))

    def test_env_pair_reports_supplying_key(self) -> None:
        vars = MappingVars({"EXA_ICON_SPACING": "2"})

        self.assertEqual(
            first_match(env_pair(vars, "EZA_ICON_SPACING", "EXA_ICON_SPACING")),
            Lookup("2", EnvSource("EXA_ICON_SPACING")),
        )

    def test_nothing_found(self) -> None:
        self.assertIsNone(first_match(flag("width", None), env(MappingVars(), "COLUMNS")))


class NumberParsingTests(unittest.TestCase):
    def test_parse_unsigned_accepts_plain_digits(self) -> None:
        self.assertEqual(parse_unsigned("0"), 0)
        self.assertEqual(parse_unsigned("+12"), 12)
        self.assertEqual(parse_unsigned("007"), 7)

    def test_parse_unsigned_rejects_what_int_would_tolerate(self) -> None:
        for text in ("", " 1", "1 ", "1_000", "-1", "١٢", "0x10"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_unsigned(text)

    def test_parse_unsigned_rejects_values_past_maxsize(self) -> None:
        self.assertEqual(parse_unsigned(str(sys.maxsize)), sys.maxsize)
        with self.assertRaises(ValueError) as exc_info:
            parse_unsigned(str(sys.maxsize + 1))

        self.assertEqual(str(exc_info.exception), "number too large to fit in target type")

    def test_parse_signed_rejects_values_out_of_range(self) -> None:
        self.assertEqual(parse_signed(str(-sys.maxsize - 1)), -sys.maxsize - 1)
        with self.assertRaises(ValueError):
            parse_signed("9" * 30)
        with self.assertRaises(ValueError):
            parse_signed("-" + "9" * 30)

    def test_parse_signed(self) -> None:
        self.assertEqual(parse_signed("-100"), -100)
        self.assertEqual(parse_signed("+3"), 3)
        with self.assertRaises(ValueError):
            parse_signed("--3")

    def test_parse_count_wraps_failures(self) -> None:
        with self.assertRaises(FailedParse) as exc_info:
            parse_count(Lookup("x", EnvSource("COLUMNS")))

        error = exc_info.exception
        self.assertEqual(error.source, EnvSource("COLUMNS"))
        self.assertIsInstance(error.__cause__, ValueError)
        self.assertEqual(
            error,
            FailedParse("x", EnvSource("COLUMNS"), ValueError("invalid digit found in 'x'")),
        )

    def test_source_descriptions(self) -> None:
        self.assertEqual(str(FlagSource("width")), "option --width")
        self.assertEqual(str(EnvSource("COLUMNS")), "environment variable COLUMNS")


if __name__ == "__main__":
    unittest.main()
