"""
Preferences dialog for Lyricstator.

Allows users to configure audio output, display, and general
application preferences.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLineEdit, QCheckBox, QPushButton, QGroupBox,
    QSpinBox, QDoubleSpinBox, QComboBox, QWidget,
)

from ...config import ConfigKey, ConfigStore

SAMPLE_RATES = [22050, 44100, 48000, 96000]
BUFFER_SIZES = [256, 512, 1024, 2048, 4096]
THEMES = ["default", "dark", "light"]


class PreferencesDialog(QDialog):
    """Application preferences dialog."""

    def __init__(self, store: ConfigStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.store = store
        self._init_ui()
        self._load_values()

    def _init_ui(self):
        """Build the dialog UI."""
        self.setWindowTitle("Preferences")
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)

        # Audio settings
        audio_group = QGroupBox("Audio")
        audio_form = QFormLayout()

        self.device_edit = QLineEdit()
        self.device_edit.setPlaceholderText("default")
        audio_form.addRow("Output device:", self.device_edit)

        self.sample_rate_combo = QComboBox()
        for rate in SAMPLE_RATES:
            self.sample_rate_combo.addItem(f"{rate} Hz", rate)
        audio_form.addRow("Sample rate:", self.sample_rate_combo)

        self.channels_spin = QSpinBox()
        self.channels_spin.setRange(1, 8)
        audio_form.addRow("Channels:", self.channels_spin)

        self.buffer_combo = QComboBox()
        for size in BUFFER_SIZES:
            self.buffer_combo.addItem(str(size), size)
        audio_form.addRow("Buffer size:", self.buffer_combo)

        self.volume_spin = QDoubleSpinBox()
        self.volume_spin.setRange(0.0, 1.0)
        self.volume_spin.setSingleStep(0.05)
        audio_form.addRow("Volume:", self.volume_spin)

        audio_group.setLayout(audio_form)
        layout.addWidget(audio_group)

        # Display settings
        display_group = QGroupBox("Display")
        display_form = QFormLayout()

        self.width_spin = QSpinBox()
        self.width_spin.setRange(320, 7680)
        display_form.addRow("Width:", self.width_spin)

        self.height_spin = QSpinBox()
        self.height_spin.setRange(240, 4320)
        display_form.addRow("Height:", self.height_spin)

        self.fullscreen_check = QCheckBox("Start in fullscreen")
        display_form.addRow(self.fullscreen_check)

        self.theme_combo = QComboBox()
        self.theme_combo.setEditable(True)
        self.theme_combo.addItems(THEMES)
        display_form.addRow("Theme:", self.theme_combo)

        display_group.setLayout(display_form)
        layout.addWidget(display_group)

        # General settings
        general_group = QGroupBox("General")
        general_form = QFormLayout()

        self.language_edit = QLineEdit()
        self.language_edit.setPlaceholderText("en")
        general_form.addRow("Language:", self.language_edit)

        self.autosave_check = QCheckBox("Autosave projects")
        general_form.addRow(self.autosave_check)

        self.autosave_spin = QSpinBox()
        self.autosave_spin.setRange(30, 3600)
        self.autosave_spin.setSuffix(" s")
        general_form.addRow("Autosave interval:", self.autosave_spin)

        self.midi_check = QCheckBox("Enable MIDI")
        general_form.addRow(self.midi_check)

        self.pitch_check = QCheckBox("Enable pitch detection")
        general_form.addRow(self.pitch_check)

        general_group.setLayout(general_form)
        layout.addWidget(general_group)

        # Buttons
        button_layout = QHBoxLayout()

        self.defaults_button = QPushButton("Restore Defaults")
        self.defaults_button.clicked.connect(self._on_restore_defaults)
        button_layout.addWidget(self.defaults_button)

        button_layout.addStretch()

        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self._on_save)
        button_layout.addWidget(self.save_button)

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_button)

        layout.addLayout(button_layout)

    def _get(self, item: ConfigKey):
        return self.store.get_value(item.key, item.default)

    def _load_values(self):
        """Load current settings into form fields."""
        self.device_edit.setText(str(self._get(ConfigKey.AUDIO_DEVICE)))
        _select_data(self.sample_rate_combo, self._get(ConfigKey.AUDIO_SAMPLE_RATE))
        self.channels_spin.setValue(int(self._get(ConfigKey.AUDIO_CHANNELS)))
        _select_data(self.buffer_combo, self._get(ConfigKey.AUDIO_BUFFER_SIZE))
        self.volume_spin.setValue(float(self._get(ConfigKey.AUDIO_VOLUME)))

        self.width_spin.setValue(int(self._get(ConfigKey.DISPLAY_WIDTH)))
        self.height_spin.setValue(int(self._get(ConfigKey.DISPLAY_HEIGHT)))
        self.fullscreen_check.setChecked(bool(self._get(ConfigKey.DISPLAY_FULLSCREEN)))
        self.theme_combo.setCurrentText(str(self._get(ConfigKey.DISPLAY_THEME)))

        self.language_edit.setText(str(self._get(ConfigKey.LANGUAGE)))
        self.autosave_check.setChecked(bool(self._get(ConfigKey.AUTOSAVE_ENABLED)))
        self.autosave_spin.setValue(int(self._get(ConfigKey.AUTOSAVE_INTERVAL)))
        self.midi_check.setChecked(bool(self._get(ConfigKey.MIDI_ENABLED)))
        self.pitch_check.setChecked(bool(self._get(ConfigKey.PITCH_DETECTION_ENABLED)))

    def _on_save(self):
        """Save form values to the store."""
        values = {
            ConfigKey.AUDIO_DEVICE: self.device_edit.text().strip() or "default",
            ConfigKey.AUDIO_SAMPLE_RATE: self.sample_rate_combo.currentData(),
            ConfigKey.AUDIO_CHANNELS: self.channels_spin.value(),
            ConfigKey.AUDIO_BUFFER_SIZE: self.buffer_combo.currentData(),
            ConfigKey.AUDIO_VOLUME: self.volume_spin.value(),
            ConfigKey.DISPLAY_WIDTH: self.width_spin.value(),
            ConfigKey.DISPLAY_HEIGHT: self.height_spin.value(),
            ConfigKey.DISPLAY_FULLSCREEN: self.fullscreen_check.isChecked(),
            ConfigKey.DISPLAY_THEME: self.theme_combo.currentText().strip() or "default",
            ConfigKey.LANGUAGE: self.language_edit.text().strip() or "en",
            ConfigKey.AUTOSAVE_ENABLED: self.autosave_check.isChecked(),
            ConfigKey.AUTOSAVE_INTERVAL: self.autosave_spin.value(),
            ConfigKey.MIDI_ENABLED: self.midi_check.isChecked(),
            ConfigKey.PITCH_DETECTION_ENABLED: self.pitch_check.isChecked(),
        }
        for item, value in values.items():
            self.store.set_value(item.key, value)

        self.store.save_config()
        self.accept()

    def _on_restore_defaults(self):
        """Reset the store and reload the form."""
        self.store.reset_to_defaults()
        self._load_values()


def _select_data(combo: QComboBox, value):
    """Select the combo entry holding value, adding it if missing."""
    index = combo.findData(value)
    if index < 0:
        combo.addItem(str(value), value)
        index = combo.count() - 1
    combo.setCurrentIndex(index)
