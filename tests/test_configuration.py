import tempfile
import unittest
from pathlib import Path

from yaml import safe_load

from commitments import configuration
from commitments.configuration import ConfigurationError
from commitments.repository.configuration import ConfigurationRepository


class TestConfigurationRepository(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.path = Path(self.temp_dir.name) / "config.yaml"

    def test_defaults_without_file(self) -> None:
        repository = ConfigurationRepository(self.path)
        self.assertEqual(
            repository.get_config(), configuration.get_default_configuration()
        )
        self.assertFalse(repository.flush())
        self.assertFalse(self.path.exists())

    def test_backfills_missing_settings(self) -> None:
        self.path.write_text("day_start_hour: 4\n")
        config = ConfigurationRepository(self.path).get_config()
        self.assertEqual(config["day_start_hour"], 4)
        self.assertEqual(config["week_start"], "sunday")
        self.assertIsNone(config["snapshot_path"])

    def test_invalid_file(self) -> None:
        for text in (
            "day_start_hour: 25\n",
            "week_start: friday\n",
            "- a list\n",
            "day_start_hour: [1,\n",
        ):
            self.path.write_text(text)
            with self.assertRaises(ConfigurationError, msg=text):
                ConfigurationRepository(self.path).get_config()

    def test_update_and_flush(self) -> None:
        repository = ConfigurationRepository(self.path)
        repository.update_config(day_start_hour=5, week_start="monday", snapshot_path="~/c.json")
        self.assertTrue(repository.is_dirty)
        self.assertTrue(repository.flush())
        self.assertFalse(repository.is_dirty)

        saved = safe_load(self.path.read_text())
        self.assertEqual(
            saved, {"day_start_hour": 5, "week_start": "monday", "snapshot_path": "~/c.json"}
        )

        repository.update_config(remove_snapshot_path=True)
        self.assertIsNone(repository.get_config()["snapshot_path"])

    def test_rejected_update_keeps_previous_config(self) -> None:
        repository = ConfigurationRepository(self.path)
        with self.assertRaises(ConfigurationError):
            repository.update_config(day_start_hour=30)
        self.assertEqual(repository.get_config()["day_start_hour"], 0)
        self.assertFalse(repository.is_dirty)


class TestSnapshotPath(unittest.TestCase):
    def test_default_and_configured(self) -> None:
        config = configuration.get_default_configuration()
        self.assertEqual(
            configuration.get_snapshot_path(config), configuration.DEFAULT_SNAPSHOT_PATH
        )

        config["snapshot_path"] = "/tmp/commitments.yaml"
        self.assertEqual(
            configuration.get_snapshot_path(config), Path("/tmp/commitments.yaml")
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
