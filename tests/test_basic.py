"""Basic unit tests for settings and logging."""

import logging
from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from renkit.settings import AppSettings, ConfigVersion


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "renkit.ini"


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, settings_file: Path) -> None:
        """A fresh INI file gets the current version and first-run flag."""
        settings_obj = AppSettings(settings_file=settings_file)
        assert settings_obj.version == ConfigVersion.CURRENT.value
        assert settings_obj.is_first_run
        assert settings_obj.get_settings_file_path() == str(settings_file)

    def test_first_run_complete(self, settings_file: Path) -> None:
        """The first-run flag survives reopening the file."""
        AppSettings(settings_file=settings_file).set_first_run_complete()
        assert not AppSettings(settings_file=settings_file).is_first_run

    def test_defaults(self, settings_file: Path) -> None:
        """Unset keys fall back to the documented defaults."""
        settings_obj = AppSettings(settings_file=settings_file)
        assert settings_obj.paths.chunks_dir == Path("pillars_assets")
        assert settings_obj.paths.output_dir == Path("_assets_")
        assert settings_obj.paths.areas_file is None
        assert settings_obj.render.strict_grid is False
        assert settings_obj.render.loader_workers == 4
        assert settings_obj.render.dump_thumbnail is False
        assert settings_obj.logging.console_logging is True
        assert settings_obj.logging.console_log_level == "INFO"
        assert settings_obj.logging.file_logging is False

    def test_values_persist(self, settings_file: Path, tmp_path: Path) -> None:
        """Values written through one instance are read back by another."""
        first = AppSettings(settings_file=settings_file)
        first.paths.chunks_dir = tmp_path / "chunks"
        first.render.strict_grid = True
        first.render.loader_workers = 8

        second = AppSettings(settings_file=settings_file)
        assert second.paths.chunks_dir == tmp_path / "chunks"
        assert second.render.strict_grid is True
        assert second.render.loader_workers == 8

    def test_loader_workers_clamped(self, settings_file: Path) -> None:
        """Worker counts are kept within 1-32."""
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.render.loader_workers = 100
        assert settings_obj.render.loader_workers == 32
        settings_obj.render.loader_workers = 0
        assert settings_obj.render.loader_workers == 1

    def test_invalid_log_level_ignored(self, settings_file: Path) -> None:
        """Unknown level names leave the stored level unchanged."""
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.logging.console_log_level = "debug"
        settings_obj.logging.console_log_level = "LOUD"
        assert settings_obj.logging.console_log_level == "DEBUG"

    def test_profiles_are_separate(self, settings_file: Path) -> None:
        """Each profile keeps its own values in the same file."""
        AppSettings(profile="a", settings_file=settings_file).render.strict_grid = True
        assert AppSettings(profile="b", settings_file=settings_file).render.strict_grid is False


class TestSettingsValidation:
    """Test settings validation."""

    def test_missing_chunks_dir_is_error(self, settings_file: Path, tmp_path: Path) -> None:
        """A missing chunks directory makes the configuration invalid."""
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.paths.chunks_dir = tmp_path / "nope"
        validation = settings_obj.validate()
        assert not validation.is_valid
        assert any("Chunks directory" in err for err in validation.errors)

    def test_valid_configuration(self, settings_file: Path, tmp_path: Path) -> None:
        """Missing output dir and area table only produce warnings."""
        (tmp_path / "chunks").mkdir()
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.paths.chunks_dir = tmp_path / "chunks"
        settings_obj.paths.output_dir = tmp_path / "out"
        settings_obj.paths.areas_file = tmp_path / "missing.json"

        validation = settings_obj.validate()
        assert validation.is_valid
        assert validation.errors == []
        assert len(validation.warnings) == 2
        assert any("loading areas will fail" in w for w in validation.warnings)


class TestSettingsMigration:
    """Test migration of older configuration files."""

    def test_assets_path_split(self, settings_file: Path) -> None:
        """A 1.0 file's single assets path becomes the chunks and output paths."""
        raw = QSettings(str(settings_file), QSettings.Format.IniFormat)
        raw.beginGroup("default")
        raw.setValue("app/version", "1.0")
        raw.setValue("paths/assets", "old_assets")
        raw.endGroup()
        raw.sync()
        del raw

        settings_obj = AppSettings(settings_file=settings_file)
        assert settings_obj.version == "1.1"
        assert settings_obj.paths.chunks_dir == Path("old_assets")
        assert settings_obj.paths.output_dir == Path("old_assets")
        assert settings_obj.settings.value("paths/assets") is None
        assert settings_obj.settings.value("app/migrated_from") == "1.0"


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, settings_file: Path) -> None:
        """Test logging setup works with settings."""
        from renkit.utils.logging_config import setup_logging

        settings_obj = AppSettings(settings_file=settings_file)
        # setup_logging returns None but should not raise
        setup_logging(settings=settings_obj)

        logger = logging.getLogger("renkit")
        assert logger.level == logging.DEBUG
        assert logging.getLogger("PIL").level == logging.INFO

    def test_console_disabled(self, settings_file: Path) -> None:
        """No console handler is installed when console logging is off."""
        from renkit.utils.logging_config import setup_logging

        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.logging.console_logging = False
        setup_logging(settings=settings_obj)

        assert not any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in logging.getLogger().handlers
        )

    def test_colored_formatter(self) -> None:
        """Only the level name is wrapped in colour codes."""
        from renkit.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s : %(message)s")
        record = logging.LogRecord("renkit", logging.ERROR, __file__, 1, "ERROR here", None, None)
        formatted = formatter.format(record)
        assert formatted.startswith("\033[31mERROR\033[0m")
        assert formatted.endswith("ERROR here")

    def test_csv_formatter_escapes_quotes(self) -> None:
        """CSV rows double embedded quotes."""
        from renkit.utils.logging_config import CSVFormatter

        record = logging.LogRecord("renkit.x", logging.INFO, __file__, 7, 'say "hi"', None, None)
        formatted = CSVFormatter().format(record)
        assert '"say ""hi"""' in formatted
        assert '"renkit.x";"7"' in formatted
