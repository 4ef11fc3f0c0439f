"""Tests for PreferencesDialog and logging setup."""

import logging
from pathlib import Path

import pytest

from lyricstator.config import ConfigStore

# Guard: skip Qt widget tests if PySide6 widgets cannot be imported
try:
    from PySide6.QtWidgets import QApplication
    _HAS_QT = True
except ImportError:
    _HAS_QT = False

needs_qt = pytest.mark.skipif(not _HAS_QT, reason="PySide6 not available")


@pytest.fixture
def store(ini_path):
    with ConfigStore(ini_path) as cfg:
        yield cfg


class TestPreferencesDialog:
    """Tests for the preferences dialog's load/save behaviour."""

    @needs_qt
    def test_fields_show_defaults(self, qtbot, store):
        from lyricstator.ui.dialogs.preferences_dialog import PreferencesDialog
        dialog = PreferencesDialog(store)
        qtbot.addWidget(dialog)

        assert dialog.device_edit.text() == "default"
        assert dialog.sample_rate_combo.currentData() == 44100
        assert dialog.width_spin.value() == 1280
        assert dialog.height_spin.value() == 720
        assert not dialog.fullscreen_check.isChecked()
        assert dialog.midi_check.isChecked()
        assert dialog.autosave_spin.value() == 300

    @needs_qt
    def test_fields_show_stored_values(self, qtbot, store):
        from lyricstator.ui.dialogs.preferences_dialog import PreferencesDialog
        store.set_value("audio/sample_rate", 48000)
        store.set_value("display/theme", "dark")
        dialog = PreferencesDialog(store)
        qtbot.addWidget(dialog)

        assert dialog.sample_rate_combo.currentData() == 48000
        assert dialog.theme_combo.currentText() == "dark"

    @needs_qt
    def test_unlisted_sample_rate_added(self, qtbot, store):
        from lyricstator.ui.dialogs.preferences_dialog import PreferencesDialog
        store.set_value("audio/sample_rate", 32000)
        dialog = PreferencesDialog(store)
        qtbot.addWidget(dialog)

        assert dialog.sample_rate_combo.currentData() == 32000

    @needs_qt
    def test_save_writes_store_and_file(self, qtbot, store, ini_path):
        from lyricstator.ui.dialogs.preferences_dialog import PreferencesDialog
        dialog = PreferencesDialog(store)
        qtbot.addWidget(dialog)

        dialog.width_spin.setValue(1920)
        dialog.fullscreen_check.setChecked(True)
        dialog.language_edit.setText("")
        dialog.save_button.click()

        assert dialog.result() == PreferencesDialog.DialogCode.Accepted.value
        assert store.get_value("display/width") == 1920
        assert store.get_value("display/fullscreen") is True
        assert store.get_value("general/language") == "en"
        assert "width=1920" in Path(ini_path).read_text(encoding="utf-8")

    @needs_qt
    def test_restore_defaults(self, qtbot, store):
        from lyricstator.ui.dialogs.preferences_dialog import PreferencesDialog
        store.set_value("display/width", 1920)
        dialog = PreferencesDialog(store)
        qtbot.addWidget(dialog)
        assert dialog.width_spin.value() == 1920

        dialog.defaults_button.click()

        assert dialog.width_spin.value() == 1280
        assert store.get_value("display/width") == 1280


class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_only(self):
        from lyricstator.utils import setup_logging
        root = setup_logging(log_level="debug", log_file=False)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path, monkeypatch):
        from lyricstator.utils import logger as logger_module
        monkeypatch.setattr(logger_module, "get_log_dir", lambda: tmp_path / "logs")

        root = logger_module.setup_logging(log_file=True)

        assert len(root.handlers) == 2
        assert list((tmp_path / "logs").glob("lyricstator_*.log"))

    def test_log_dir_under_cache(self, isolated_config_home):
        from lyricstator.utils import get_log_dir
        log_dir = get_log_dir()
        assert log_dir.parts[-2:] == ("lyricstator", "logs")


class TestMain:
    """Tests for the preferences entry point."""

    @needs_qt
    @pytest.mark.parametrize("dialog_result", [0, 1], ids=["cancelled", "saved"])
    def test_exit_code_is_zero(self, qapp, monkeypatch, dialog_result):
        from lyricstator import main as main_module
        from lyricstator.ui.dialogs.preferences_dialog import PreferencesDialog

        previous_name = qapp.applicationName()
        previous_org = qapp.organizationName()
        monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr(PreferencesDialog, "exec", lambda self: dialog_result)
        try:
            assert main_module.main() == 0
        finally:
            qapp.setApplicationName(previous_name)
            qapp.setOrganizationName(previous_org)
