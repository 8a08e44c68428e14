from typing import Optional
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget
from config.constants import APP_LANGUAGES, LAUNCHER_VERSION, UI_COLORS
from core.controller import LocalizerController
from core.exceptions import ValidationError
from models.languages import LANGUAGE_OPTIONS
from models.settings_models import AppState
from threads.background_workers import InstallLocalizationThread, RemoveLocalizationThread
from ui.widgets.custom_controls import NoScrollComboBox
from utils.game_utils import get_running_game_process

class LocalizerWindow(QWidget):
    update_status_signal = pyqtSignal(str, str)

    def __init__(self, controller: LocalizerController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.worker: Optional[InstallLocalizationThread | RemoveLocalizationThread] = None
        self.setWindowTitle(f'Star Citizen Localization Manager {LAUNCHER_VERSION}')
        self.resize(560, 320)
        self.init_ui()
        self.update_status_signal.connect(self._update_status)

    def init_ui(self):
        layout = QVBoxLayout(self)
        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)
        folder_row = QHBoxLayout()
        folder_row.addWidget(QLabel('Game base folder:'))
        self.folder_edit = QLineEdit()
        self.folder_edit.setPlaceholderText('.../Roberts Space Industries/StarCitizen')
        self.folder_edit.returnPressed.connect(self._on_folder_entered)
        folder_row.addWidget(self.folder_edit)
        self.apply_folder_button = QPushButton('Apply')
        self.apply_folder_button.clicked.connect(self._on_folder_entered)
        folder_row.addWidget(self.apply_folder_button)
        layout.addLayout(folder_row)
        self.version_combo = NoScrollComboBox()
        self.version_combo.currentIndexChanged.connect(self._on_version_changed)
        layout.addWidget(QLabel('Game version:'))
        layout.addWidget(self.version_combo)
        self.language_combo = NoScrollComboBox()
        self.language_combo.set_items([(option.display_name(), idx) for idx, option in enumerate(LANGUAGE_OPTIONS)])
        self.language_combo.currentIndexChanged.connect(self._on_language_changed)
        layout.addWidget(QLabel('Translation language:'))
        layout.addWidget(self.language_combo)
        self.app_language_combo = NoScrollComboBox()
        self.app_language_combo.set_items([(name, code) for code, name in APP_LANGUAGES.items()])
        self.app_language_combo.currentIndexChanged.connect(self._on_app_language_changed)
        layout.addWidget(QLabel('Interface language:'))
        layout.addWidget(self.app_language_combo)
        buttons = QHBoxLayout()
        self.install_button = QPushButton('Install localization')
        self.install_button.clicked.connect(self._on_install)
        self.remove_button = QPushButton('Remove localization')
        self.remove_button.clicked.connect(self._on_remove)
        buttons.addWidget(self.install_button)
        buttons.addWidget(self.remove_button)
        layout.addLayout(buttons)
        layout.addStretch(1)

    def perform_initial_setup(self):
        self.update_status_signal.emit('Loading settings and searching for the Star Citizen folder...', UI_COLORS['status_info'])
        state = self.controller.startup()
        self._apply_state(state)
        if (running_game := get_running_game_process()):
            self.update_status_signal.emit(f'{running_game} is running. Close the game before installing the localization.', UI_COLORS['status_error'])
        elif state.base_folder:
            self.update_status_signal.emit(f'Base folder found: {state.base_folder}', UI_COLORS['status_success'])
        else:
            self.update_status_signal.emit('Base folder not found. Please enter it manually.', UI_COLORS['status_info'])

    def _apply_state(self, state: AppState):
        self.folder_edit.setText(state.base_folder or '')
        self.version_combo.set_items([(v, v) for v in state.versions], state.selected_version)
        # duplicate codes exist in LANGUAGE_OPTIONS, keep the visible entry when it already matches
        current = self.language_combo.currentData()
        if current is None or LANGUAGE_OPTIONS[current].code != state.language_code:
            index = next((i for i, option in enumerate(LANGUAGE_OPTIONS) if option.code == state.language_code), 0)
            self.language_combo.set_items([(option.display_name(), idx) for idx, option in enumerate(LANGUAGE_OPTIONS)], index)
        self.app_language_combo.set_items([(name, code) for code, name in APP_LANGUAGES.items()], state.app_language)
        self._set_buttons_enabled(self.worker is None)

    def _set_buttons_enabled(self, enabled: bool):
        has_target = bool(self.controller.state.base_folder and self.controller.state.selected_version)
        self.install_button.setEnabled(enabled and has_target)
        self.remove_button.setEnabled(enabled and has_target)
        self.apply_folder_button.setEnabled(enabled)
        self.folder_edit.setEnabled(enabled)
        self.version_combo.setEnabled(enabled)
        self.language_combo.setEnabled(enabled)
        self.app_language_combo.setEnabled(enabled)

    def _update_status(self, message: str, color: str = 'white'):
        self.status_label.setText(message)
        self.status_label.setStyleSheet(f'color: {color};')

    def _run_guarded(self, action, *args):
        try:
            self._apply_state(action(*args))
        except ValidationError as e:
            self.update_status_signal.emit(str(e), UI_COLORS['status_error'])

    def _on_folder_entered(self):
        path = self.folder_edit.text()
        self._run_guarded(self.controller.change_folder, path)
        if self.controller.state.base_folder == path.strip():
            if self.controller.state.versions:
                self.update_status_signal.emit(f'Base folder selected: {path.strip()}', UI_COLORS['status_info'])
            else:
                self.update_status_signal.emit('No game versions were found in this folder.', UI_COLORS['status_warning'])

    def _on_version_changed(self, _index: int):
        version = self.version_combo.currentData()
        if version:
            self._run_guarded(self.controller.select_version, version)

    def _on_language_changed(self, _index: int):
        idx = self.language_combo.currentData()
        if idx is not None:
            self._run_guarded(self.controller.select_language, LANGUAGE_OPTIONS[idx].code)

    def _on_app_language_changed(self, _index: int):
        code = self.app_language_combo.currentData()
        if code:
            self._run_guarded(self.controller.select_app_language, code)

    def _start_worker(self, worker):
        self.worker = worker
        worker.status.connect(self._update_status)
        worker.finished.connect(self._on_worker_finished)
        self._set_buttons_enabled(False)
        worker.start()

    def _on_install(self):
        if self.worker is None:
            self._start_worker(InstallLocalizationThread(self.controller, self))

    def _on_remove(self):
        if self.worker is None:
            self._start_worker(RemoveLocalizationThread(self.controller, self))

    def _on_worker_finished(self, _ok: bool, _detail: str):
        worker, self.worker = self.worker, None
        if worker is not None:
            worker.wait()
            worker.deleteLater()
        self._apply_state(self.controller.state)
