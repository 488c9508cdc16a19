import contextlib
import io
import json
import os
import tempfile
import unittest

import export_tokens


FIXTURE_PATH = os.path.join(os.path.dirname(__file__), "fixtures", "theme.css")


class TestExportTokensCli(unittest.TestCase):
    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = export_tokens.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_converts_fixture(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "tokens.json")
            code, stdout, _ = self._run(["--input", FIXTURE_PATH, "--output", target, "--check"])
            self.assertEqual(code, 0)
            self.assertIn(f"Wrote: {target}", stdout)
            with open(target, "r", encoding="utf-8") as f:
                payload = json.load(f)
            self.assertEqual(payload["Font Weight"]["font-weight-bold"]["$value"], 700)

    def test_missing_input_exits_1_without_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "tokens.json")
            code, _, stderr = self._run(["--input", os.path.join(tmp, "nope.css"), "--output", target])
            self.assertEqual(code, 1)
            self.assertTrue(stderr.startswith("Error:"))
            self.assertFalse(os.path.exists(target))

    def test_env_file_supplies_paths(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "from_env.json")
            env_path = os.path.join(tmp, ".env")
            with open(env_path, "w", encoding="utf-8") as f:
                f.write(f"THEME_INPUT={FIXTURE_PATH}\nTHEME_OUTPUT={target}\n")
            try:
                code, _, _ = self._run(["--env", env_path])
            finally:
                os.environ.pop("THEME_INPUT", None)
                os.environ.pop("THEME_OUTPUT", None)
            self.assertEqual(code, 0)
            self.assertTrue(os.path.exists(target))


if __name__ == "__main__":
    unittest.main()
