import sys
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from io import StringIO

# Add the parent directory to sys.path to import the togglcheck package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from togglcheck.__main__ import export_report
from togglcheck.config import CheckConfig
from togglcheck.errors import FormatError
from togglcheck.reports.time_entry import TimeEntry
from togglcheck.reports.overlap_validator import (
    OverlapWarning, ValidationReport, validate, check_entries, sort_entries, API_ENTRY_LIMIT
)


def ts(seconds: int) -> str:
    """Timestamp `seconds` after 2018-06-13T12:00:00Z."""
    h, rest = divmod(12 * 3600 + seconds, 3600)
    m, s = divmod(rest, 60)
    return f"2018-06-13T{h:02}:{m:02}:{s:02}+00:00"


class TestTimeEntry(unittest.TestCase):
    """Test the TimeEntry wrapper."""

    def test_fields(self):
        entry = TimeEntry({"id": 7, "start": ts(0), "stop": ts(60), "duration": 60, "description": "Work"})
        self.assertEqual(entry.id, 7)
        self.assertEqual(entry.start, ts(0))
        self.assertEqual(entry.stop, ts(60))
        self.assertEqual(entry.duration, 60)
        self.assertEqual(entry.description, "Work")
        self.assertFalse(entry.is_running)

    def test_running_entry(self):
        entry = TimeEntry({"start": ts(0), "duration": -1528891200})
        self.assertIsNone(entry.stop)
        self.assertTrue(entry.is_running)
        self.assertEqual(entry.description, "No description")

    def test_invalid_entries(self):
        for data in [{"stop": ts(10)}, {"start": None}, {"start": 1528891200}, {"start": ts(0), "stop": 1528891210}, [ts(0)], None]:
            with self.subTest(data=data):
                with self.assertRaises(FormatError):
                    TimeEntry(data)

    def test_read_only(self):
        entry = TimeEntry({"start": ts(0)})
        with self.assertRaises(AttributeError):
            entry.stop = ts(10)


class TestValidate(unittest.TestCase):
    """Test the overlap validator."""

    def test_empty(self):
        self.assertEqual(validate([]), [])

    def test_back_to_back(self):
        entries = [{"start": ts(0), "stop": ts(60)}, {"start": ts(60), "stop": ts(120)}]
        for window in [0, 1, 60, 3600]:
            with self.subTest(window=window):
                self.assertEqual(validate(entries, window), [])

    def test_overlap_within_window(self):
        entries = [{"start": ts(0), "stop": ts(9)}, {"start": ts(1), "stop": ts(10)}]
        warnings = validate(entries, 60)
        self.assertEqual(warnings, [OverlapWarning(ts(1), ts(9))])
        self.assertEqual(warnings[0].overlap_sec, 8)
        self.assertEqual(str(warnings[0]),
                         f"Start time ({ts(1)}) is before stop time ({ts(9)}).")

    def test_window_comparison_is_strict(self):
        entries = [{"start": ts(0), "stop": ts(9)}, {"start": ts(1), "stop": ts(10)}]
        self.assertEqual(validate(entries, 8), [])
        self.assertEqual(len(validate(entries, 9)), 1)

    def test_gap(self):
        entries = [{"start": ts(0), "stop": ts(10)}, {"start": ts(20), "stop": ts(30)}]
        self.assertEqual(validate(entries), [])

    def test_running_entry_does_not_move_frontier(self):
        entries = [
            {"start": ts(0), "stop": ts(30)},
            {"start": ts(5)},
            {"start": ts(10), "stop": ts(20)},
        ]
        warnings = validate(entries)
        self.assertEqual(warnings, [OverlapWarning(ts(5), ts(30)), OverlapWarning(ts(10), ts(30))])

    def test_frontier_follows_last_stop(self):
        # A long entry followed by a short one: the short one's stop becomes the frontier
        entries = [
            {"start": ts(0), "stop": ts(50)},
            {"start": ts(10), "stop": ts(20)},
            {"start": ts(30), "stop": ts(40)},
        ]
        self.assertEqual(validate(entries), [OverlapWarning(ts(10), ts(50))])

    def test_accepts_time_entries(self):
        entries = [TimeEntry({"start": ts(0), "stop": ts(9)}), TimeEntry({"start": ts(1), "stop": ts(10)})]
        self.assertEqual(len(validate(entries)), 1)

    def test_does_not_sort(self):
        entries = [{"start": ts(1), "stop": ts(10)}, {"start": ts(0), "stop": ts(9)}]
        self.assertEqual(len(validate(entries)), 1)
        self.assertEqual(validate(entries)[0], OverlapWarning(ts(0), ts(10)))

    def test_deterministic(self):
        entries = [{"start": ts(i * 5), "stop": ts(i * 5 + 7)} for i in range(20)]
        self.assertEqual(validate(entries), validate(entries))
        self.assertEqual(len(validate(entries)), 19)

    def test_malformed_timestamp(self):
        entries = [{"start": ts(0), "stop": "2018-06-13T12:00:09"}, {"start": ts(1), "stop": ts(10)}]
        with self.assertRaises(FormatError):
            validate(entries)


class TestValidationReport(unittest.TestCase):
    """Test sorting, counting and rendering of reports."""

    def setUp(self):
        self.raw_entries = [
            {"id": 2, "start": ts(1), "stop": ts(10)},
            {"id": 3, "start": ts(100)},
            {"id": 1, "start": ts(0), "stop": ts(9)},
        ]

    def test_sort_entries(self):
        self.assertEqual([e.raw_data["id"] for e in sort_entries(self.raw_entries)], [1, 2, 3])

    def test_check_entries(self):
        report = check_entries(self.raw_entries)
        self.assertEqual(report.entry_count, 3)
        self.assertFalse(report.limit_reached)
        self.assertEqual(report.lines(), [
            f"Start time ({ts(1)}) is before stop time ({ts(9)}).",
            "3 entries checked.",
        ])

    def test_empty_report(self):
        report = check_entries([])
        self.assertEqual(report.render(), "0 entries checked.")

    def test_limit_reached(self):
        report = ValidationReport([], API_ENTRY_LIMIT)
        self.assertTrue(report.limit_reached)
        self.assertEqual(len(report.lines()), 2)
        self.assertIn("API limit", report.lines()[-1])
        self.assertFalse(ValidationReport([], API_ENTRY_LIMIT - 1).limit_reached)

    def test_markdown(self):
        report = check_entries(self.raw_entries)
        md = report.to_markdown()
        self.assertIn("### Overlaps (1 of 3 entries)", md)
        self.assertIn("| Start", md)
        self.assertIn("00:00:08", md)

    def test_markdown_without_overlaps(self):
        self.assertIn("No overlapping entries.", ValidationReport([], 2).to_markdown())


class TestExport(unittest.TestCase):
    """Test CSV and Markdown export."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.report = check_entries([
            {"start": ts(0), "stop": ts(9)},
            {"start": ts(1), "stop": ts(10)},
        ])
        self.config = CheckConfig("abc123")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    @patch('sys.stdout', new_callable=StringIO)
    def test_csv_export(self, mock_stdout):
        prefix = os.path.join(self.tmpdir, "june")
        export_report(self.report, self.config, csv_prefix=prefix)
        with open(f"{prefix}_overlaps.csv") as f:
            lines = f.read().splitlines()
        self.assertEqual(lines[0], "#,Start,Previous stop,Overlap")
        self.assertEqual(lines[1], f"1,{ts(1)},{ts(9)},00:00:08")
        self.assertIn("1 overlaps written", mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=StringIO)
    def test_markdown_export_appends(self, mock_stdout):
        md_path = os.path.join(self.tmpdir, "overlaps.md")
        export_report(self.report, self.config, md_path=md_path)
        export_report(self.report, self.config, md_path=md_path)
        with open(md_path, encoding='utf-8') as f:
            content = f.read()
        self.assertTrue(content.startswith("# Overlap check (allowed window 00:01:00)"))
        self.assertEqual(content.count("### Overlaps"), 2)
        self.assertIn("Appending report", mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=StringIO)
    def test_markdown_export_overwrite(self, mock_stdout):
        md_path = os.path.join(self.tmpdir, "overlaps.md")
        export_report(self.report, self.config, md_path=md_path)
        export_report(self.report, self.config, md_path=md_path, overwrite=True)
        with open(md_path, encoding='utf-8') as f:
            self.assertEqual(f.read().count("### Overlaps"), 1)


if __name__ == '__main__':
    unittest.main()
