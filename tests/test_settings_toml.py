import unittest
import tomllib
from pathlib import Path

from settings_service import (
    PROJECT_ROOT,
    SettingsService,
    _clear_settings_cache,
    _load_settings,
    resolve_project_path,
)


class TestSettingsToml(unittest.TestCase):
    """Test suite to validate settings.toml structure and contents."""

    @classmethod
    def setUpClass(cls):
        """Load settings.toml once for all tests."""
        settings_path = Path(__file__).parent.parent / "settings.toml"
        with open(settings_path, "rb") as f:
            cls.settings = tomllib.load(f)

    def test_toml_file_can_be_loaded(self):
        """Test that settings.toml exists and can be parsed without errors."""
        settings_path = Path(__file__).parent.parent / "settings.toml"
        self.assertTrue(settings_path.exists(), "settings.toml file does not exist")

        with open(settings_path, "rb") as f:
            settings = tomllib.load(f)

        self.assertIsInstance(settings, dict)

    def test_required_sections_exist(self):
        for section in ("env", "db_paths", "catalog"):
            with self.subTest(section=section):
                self.assertIn(section, self.settings, f"{section} section is missing")

    def test_log_level_is_valid(self):
        self.assertIn(
            self.settings["env"]["log_level"],
            ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        )

    def test_builds_database_configured(self):
        """The default DatabaseConfig alias must be present."""
        self.assertIn("builds", self.settings["db_paths"])
        self.assertTrue(self.settings["db_paths"]["builds"].endswith(".db"))

    def test_catalog_document_exists(self):
        catalog_path = resolve_project_path(self.settings["catalog"]["path"])
        self.assertTrue(catalog_path.exists(), f"{catalog_path} does not exist")


class TestSettingsService(unittest.TestCase):
    def setUp(self):
        _clear_settings_cache()

    def tearDown(self):
        _clear_settings_cache()

    def test_database_paths_are_absolute(self):
        paths = SettingsService().database_paths
        self.assertTrue(all(p.is_absolute() for p in paths.values()))
        self.assertEqual(paths["builds"], PROJECT_ROOT / "data" / "motorecs.db")

    def test_catalog_accessors(self):
        settings = SettingsService()
        self.assertEqual(settings.catalog_path.name, "bike_descriptions.xml")
        self.assertEqual(settings.default_image, "default_image")
        self.assertEqual(settings.missing_description, "No description found.")

    def test_settings_are_cached(self):
        first = _load_settings()
        self.assertIs(_load_settings(), first)

    def test_resolve_project_path_keeps_absolute(self):
        absolute = Path("/tmp/elsewhere.db")
        self.assertEqual(resolve_project_path(absolute), absolute)
        self.assertEqual(resolve_project_path("data/x.db"), PROJECT_ROOT / "data" / "x.db")

    def test_catalog_defaults_when_keys_missing(self):
        import tempfile

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.toml"
            path.write_text(
                '[env]\nenv = "dev"\nlog_level = "DEBUG"\n\n'
                '[db_paths]\nbuilds = "x.db"\n\n'
                '[catalog]\npath = "bikes.xml"\n'
            )
            settings = SettingsService(path)
            self.assertEqual(settings.env, "dev")
            self.assertEqual(settings.log_level, "DEBUG")
            self.assertEqual(settings.default_image, "default_image")
            self.assertEqual(settings.missing_description, "No description found.")


if __name__ == "__main__":
    unittest.main()
