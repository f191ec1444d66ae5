import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from pingmon.registry import DEFAULT_TARGETS, load_target_file, resolve_targets


class RegistryTests(unittest.TestCase):
    def test_env_targets_win(self) -> None:
        targets = resolve_targets(
            env_targets=("a.example", "b.example"),
            path=Path("/nonexistent/targets.yml"),
        )
        self.assertEqual(targets, ["a.example", "b.example"])

    def test_defaults_when_nothing_configured(self) -> None:
        targets = resolve_targets(env_targets=(), path=Path("/nonexistent/targets.yml"))
        self.assertEqual(targets, list(DEFAULT_TARGETS))

    def test_yaml_file_is_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "targets.yml"
            path.write_text("targets:\n  - example.com\n  - ' https://example.org/ '\n")

            targets = resolve_targets(env_targets=(), path=path)

        self.assertEqual(targets, ["example.com", "https://example.org/"])

    def test_duplicate_targets_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "targets.yml"
            path.write_text("targets:\n  - example.com\n  - example.com\n")

            with self.assertRaises(ValueError):
                load_target_file(path)

    def test_blank_or_empty_targets_rejected(self) -> None:
        for body in ("targets: []\n", "targets:\n  - '  '\n", "{}\n"):
            with self.subTest(body=body):
                with tempfile.TemporaryDirectory() as td:
                    path = Path(td) / "targets.yml"
                    path.write_text(body)

                    with self.assertRaises(ValidationError):
                        load_target_file(path)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_target_file(Path("/nonexistent/targets.yml"))


if __name__ == "__main__":
    unittest.main()
