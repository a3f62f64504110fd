"""Tests for scriptutils.utils."""

from __future__ import annotations

import unittest

from scriptutils.utils import (
    ConversionIncomplete,
    FallbackFailure,
    SpawnFailure,
    ToolkitError,
    check_binary_exists,
    time_diff,
)


class TestTimeDiff(unittest.TestCase):
    def test_minutes_and_seconds(self) -> None:
        self.assertEqual(time_diff(1700000000000, 1700000365000), "00:06:05")

    def test_zero(self) -> None:
        self.assertEqual(time_diff(5, 5), "00:00:00")

    def test_over_a_day(self) -> None:
        self.assertEqual(time_diff(0, 25 * 3600 * 1000), "25:00:00")

    def test_sub_second_truncated(self) -> None:
        self.assertEqual(time_diff(0, 1999), "00:00:01")

    def test_negative_raises(self) -> None:
        with self.assertRaises(ValueError):
            time_diff(10, 0)


class TestErrors(unittest.TestCase):
    def test_hierarchy(self) -> None:
        for cls in (SpawnFailure, FallbackFailure, ConversionIncomplete):
            self.assertTrue(issubclass(cls, ToolkitError))

    def test_conversion_incomplete_message(self) -> None:
        err = ConversionIncomplete("doc.txt")
        self.assertEqual(str(err), "Text file was not created")
        self.assertEqual(err.text_path, "doc.txt")

    def test_fallback_failure_message(self) -> None:
        err = FallbackFailure("doc.pdf", RuntimeError("bad xref"))
        self.assertEqual(str(err), "Could not convert doc.pdf to a text file: bad xref")
        self.assertEqual(err.document_path, "doc.pdf")

    def test_fallback_failure_without_cause(self) -> None:
        self.assertEqual(str(FallbackFailure("doc.pdf")), "Could not convert doc.pdf to a text file")


class TestCheckBinary(unittest.TestCase):
    def test_common_binary_exists(self) -> None:
        self.assertTrue(check_binary_exists("python3") or check_binary_exists("python"))

    def test_nonexistent_binary(self) -> None:
        self.assertFalse(check_binary_exists("_nonexistent_binary_xyz_12345"))


if __name__ == "__main__":
    unittest.main()
