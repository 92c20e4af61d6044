import unittest
from pathlib import Path
import tempfile


from sonar_review.io import read_json, write_json_atomic


class TestSafeIO(unittest.TestCase):
    def test_write_json_is_atomic_and_cleans_temp(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            out_dir = root / "out" / "nested"
            out_path = out_dir / "review.json"

            payload = {"violations": [{"file": "b.py", "line": 2}, {"file": "a.py", "line": 1}]}
            write_json_atomic(out_path, payload)

            self.assertTrue(out_path.exists())
            self.assertEqual(payload, read_json(out_path))
            self.assertEqual([], list(out_dir.glob("*.tmp")))

    def test_write_json_keeps_key_order_and_trailing_newline(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_path = Path(td) / "review.json"
            write_json_atomic(out_path, {"z": 1, "a": "é"})

            text = out_path.read_text(encoding="utf-8")
            self.assertLess(text.index('"z"'), text.index('"a"'))
            self.assertIn("é", text)
            self.assertTrue(text.endswith("\n"))

    def test_overwrite_replaces_content(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_path = Path(td) / "review.json"
            write_json_atomic(out_path, {"v": 1})
            write_json_atomic(out_path, {"v": 2})
            self.assertEqual({"v": 2}, read_json(out_path))


if __name__ == "__main__":
    unittest.main()
