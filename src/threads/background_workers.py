import logging
from PyQt6.QtCore import QThread, pyqtSignal
from config.constants import UI_COLORS
from core.exceptions import LocalizerError

class InstallLocalizationThread(QThread):
    status = pyqtSignal(str, str)
    finished = pyqtSignal(bool, str)

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller

    def run(self):
        self.status.emit('Installing localization...', UI_COLORS['status_warning'])
        try:
            localization_dir = self.controller.install()
            self.status.emit(f'Localization installed into {localization_dir}', UI_COLORS['status_success'])
            self.finished.emit(True, localization_dir)
        except LocalizerError as e:
            logging.error(f'Install failed: {e}')
            self.status.emit(f'Installation error: {e}', UI_COLORS['status_error'])
            self.finished.emit(False, str(e))
        except Exception as e:
            logging.exception('Unexpected error during install')
            self.status.emit(f'Installation error: {e}', UI_COLORS['status_error'])
            self.finished.emit(False, str(e))

class RemoveLocalizationThread(QThread):
    status = pyqtSignal(str, str)
    finished = pyqtSignal(bool, str)

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller

    def run(self):
        self.status.emit('Removing localization...', UI_COLORS['status_warning'])
        try:
            self.controller.remove()
            self.status.emit('Localization removed. The g_language line was removed from user.cfg.', UI_COLORS['status_success'])
            self.finished.emit(True, '')
        except LocalizerError as e:
            logging.error(f'Remove failed: {e}')
            self.status.emit(f'Removal error: {e}', UI_COLORS['status_error'])
            self.finished.emit(False, str(e))
        except Exception as e:
            logging.exception('Unexpected error during remove')
            self.status.emit(f'Removal error: {e}', UI_COLORS['status_error'])
            self.finished.emit(False, str(e))
