import tempfile
import unittest
from pathlib import Path

from src.ui.apply_styles import STYLES_PATH, apply_styles


class FakeStreamlit:
    def __init__(self):
        self.calls = []

    def markdown(self, body, unsafe_allow_html=False):
        self.calls.append((body, unsafe_allow_html))


class ApplyStylesTest(unittest.TestCase):
    def test_packaged_sheet_styles_forecast_table(self):
        fake = FakeStreamlit()
        self.assertTrue(apply_styles(st_module=fake))
        body, unsafe = fake.calls[0]
        self.assertTrue(unsafe)
        self.assertTrue(body.startswith("<style>"))
        self.assertIn("table.forecast", body)
        self.assertIn(STYLES_PATH.read_text(encoding="utf-8"), body)

    def test_missing_sheet_is_skipped(self):
        fake = FakeStreamlit()
        with tempfile.TemporaryDirectory() as tmp:
            self.assertFalse(apply_styles(Path(tmp) / "missing.css", st_module=fake))
        self.assertEqual(fake.calls, [])


if __name__ == "__main__":
    unittest.main()
