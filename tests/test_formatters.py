"""Tests for ui.formatters."""

import unittest
from datetime import date

from domain.models import BuildRecord
from ui.formatters import (
    delivery_date_update,
    earliest_delivery_date,
    format_build_price,
    format_build_title,
    format_delivery,
    format_price_compact,
    parse_delivery_date,
    resolve_image_path,
)


class TestFormatters(unittest.TestCase):
    def test_format_price_compact(self):
        self.assertEqual(format_price_compact(11500), "$11.5k")
        self.assertEqual(format_price_compact(0), "N/A")

    def test_format_build_price(self):
        self.assertEqual(format_build_price(12500), "$12,500.00 ($12.5k)")

    def test_format_delivery(self):
        self.assertEqual(format_delivery("04/01/2025", False), "04/01/2025 (90 days)")
        self.assertEqual(format_delivery("04/01/2025", True), "04/01/2025 (30 days)")

    def test_format_build_title(self):
        record = BuildRecord("Ducati", "2024", "750cc", "Track", "", "", False, id=3)
        self.assertEqual(format_build_title(record), "#3 2024 Ducati 750cc")

    def test_format_build_title_blank_record(self):
        record = BuildRecord("", "", "", "Track", "", "", False)
        self.assertEqual(format_build_title(record), "Untitled build")


class TestDeliveryDatePicker(unittest.TestCase):
    def test_parse_delivery_date(self):
        self.assertEqual(parse_delivery_date("04/01/2025"), date(2025, 4, 1))
        self.assertIsNone(parse_delivery_date(""))
        self.assertIsNone(parse_delivery_date("next spring"))

    def test_picking_the_default_date_is_stored(self):
        # nothing stored yet, the user picks the same day the default would give
        self.assertEqual(delivery_date_update("", date(2025, 4, 1)), "04/01/2025")

    def test_unchanged_pick_is_not_rewritten(self):
        self.assertIsNone(delivery_date_update("04/01/2025", date(2025, 4, 1)))
        self.assertIsNone(delivery_date_update("", None))

    def test_changed_and_cleared_picks(self):
        self.assertEqual(delivery_date_update("04/01/2025", date(2025, 5, 2)), "05/02/2025")
        self.assertEqual(delivery_date_update("04/01/2025", None), "")

    def test_freeform_value_kept_when_picker_empty(self):
        self.assertIsNone(delivery_date_update("next spring", None))

    def test_earliest_date_is_tomorrow(self):
        self.assertEqual(earliest_delivery_date(date(2025, 1, 1)), date(2025, 1, 2))
        self.assertEqual(
            earliest_delivery_date(date(2025, 1, 1), date(2025, 6, 1)), date(2025, 1, 2)
        )

    def test_earliest_date_allows_older_stored_pick(self):
        stored = date(2024, 12, 20)
        self.assertEqual(earliest_delivery_date(date(2025, 1, 1), stored), stored)


class TestResolveImagePath(unittest.TestCase):
    def test_finds_matching_file(self):
        import tempfile
        from pathlib import Path

        with tempfile.TemporaryDirectory() as tmpdir:
            images = Path(tmpdir)
            (images / "ducati.jpg").write_bytes(b"")
            self.assertEqual(resolve_image_path("ducati", images), images / "ducati.jpg")
            self.assertIsNone(resolve_image_path("honda", images))

    def test_blank_reference(self):
        self.assertIsNone(resolve_image_path(""))


if __name__ == "__main__":
    unittest.main()
