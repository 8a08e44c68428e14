import os

import pytest

pytest.importorskip("PyQt6")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from core.controller import LocalizerController
from core.installer import LocalizationInstaller
from core.locator import InstallationLocator
from core.settings_store import SettingsStore
from threads.background_workers import InstallLocalizationThread, RemoveLocalizationThread
from ui.main_window import LocalizerWindow


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


class BrokenController:
    def install(self):
        raise ValueError("unexpected failure")

    def remove(self):
        raise ValueError("unexpected failure")


@pytest.mark.parametrize("thread_class", [InstallLocalizationThread, RemoveLocalizationThread])
def test_worker_reports_unexpected_errors_as_failure(qapp, thread_class):
    thread = thread_class(BrokenController())
    results = []
    thread.finished.connect(lambda ok, message: results.append((ok, message)))

    thread.run()

    assert results == [(False, "unexpected failure")]


def test_all_selectors_are_locked_while_an_operation_runs(qapp, tmp_path):
    controller = LocalizerController(
        store=SettingsStore(str(tmp_path / "config.json")),
        locator=InstallationLocator(strategies=[]),
        installer=LocalizationInstaller(lambda version: "text"),
    )
    window = LocalizerWindow(controller)

    window._set_buttons_enabled(False)

    for widget in (window.folder_edit, window.apply_folder_button, window.version_combo,
                   window.language_combo, window.app_language_combo, window.install_button, window.remove_button):
        assert not widget.isEnabled()

    window._set_buttons_enabled(True)
    assert window.app_language_combo.isEnabled()
    window.close()
