import logging
import os
from dataclasses import replace
from typing import Optional
from config.constants import APP_LANGUAGES, DEFAULT_APP_LANGUAGE
from core.exceptions import ValidationError
from core.installer import LocalizationInstaller
from core.locator import InstallationLocator, pick_default_version
from core.settings_store import SettingsStore
from models.languages import DEFAULT_LANGUAGE_CODE, is_known_language
from models.settings_models import AppState, LocalizationTarget, WriteResult

class LocalizerController:
    """Owns the current AppState and is the only place it changes.

    Every public operation builds a new state from the previous one, persists
    it through the settings store and returns it.
    """

    def __init__(self, store: Optional[SettingsStore] = None, locator: Optional[InstallationLocator] = None, installer: Optional[LocalizationInstaller] = None):
        self.store = store or SettingsStore()
        self.locator = locator or InstallationLocator()
        self.installer = installer or LocalizationInstaller()
        self.state = AppState(language_code=DEFAULT_LANGUAGE_CODE, app_language=DEFAULT_APP_LANGUAGE)
        self.last_write: Optional[WriteResult] = None
        self.auto_found = False

    def _commit(self, state: AppState, keep_language: bool = True) -> AppState:
        self.state = state
        self.last_write = self.store.write(state.to_settings(keep_language=keep_language))
        if not self.last_write.ok:
            logging.warning(f'Settings not saved: {self.last_write.error}')
        return state

    def startup(self) -> AppState:
        settings = self.store.read()
        base_folder = settings.base_folder_path
        self.auto_found = False
        if not base_folder:
            base_folder = self.locator.auto_find()
            self.auto_found = base_folder is not None
        versions = tuple(self.locator.list_versions(base_folder))
        language_code = settings.selected_language_code if settings.selected_language_code and is_known_language(settings.selected_language_code) else DEFAULT_LANGUAGE_CODE
        app_language = settings.app_language if settings.app_language in APP_LANGUAGES else DEFAULT_APP_LANGUAGE
        state = AppState(base_folder=base_folder, versions=versions, selected_version=pick_default_version(versions, settings.selected_version), language_code=language_code, app_language=app_language)
        return self._commit(state)

    def change_folder(self, path: str) -> AppState:
        path = (path or '').strip()
        if not path or not os.path.isdir(path):
            raise ValidationError(f'Folder {path!r} does not exist.')
        versions = tuple(self.locator.list_versions(path))
        return self._commit(replace(self.state, base_folder=path, versions=versions, selected_version=pick_default_version(versions)))

    def refresh_versions(self) -> AppState:
        versions = tuple(self.locator.list_versions(self.state.base_folder))
        return self._commit(replace(self.state, versions=versions, selected_version=pick_default_version(versions, self.state.selected_version)))

    def select_version(self, version: str) -> AppState:
        if version not in self.state.versions:
            raise ValidationError(f'Version {version!r} was not found in {self.state.base_folder}.')
        return self._commit(replace(self.state, selected_version=version))

    def select_language(self, code: str) -> AppState:
        if not is_known_language(code):
            raise ValidationError(f'Unknown language code {code!r}.')
        return self._commit(replace(self.state, language_code=code))

    def select_app_language(self, code: str) -> AppState:
        if code not in APP_LANGUAGES:
            raise ValidationError(f'Unknown app language {code!r}.')
        return self._commit(replace(self.state, app_language=code))

    def current_target(self) -> LocalizationTarget:
        if not self.state.base_folder:
            raise ValidationError('Please select the Star Citizen base folder.')
        if not self.state.selected_version:
            raise ValidationError('Please select a game version.')
        return self.state.target()

    def install(self) -> str:
        target = self.current_target()
        localization_dir = self.installer.install(target)
        self._commit(self.state)
        return localization_dir

    def remove(self) -> AppState:
        target = self.current_target()
        self.installer.remove(target)
        return self._commit(self.state, keep_language=False)

    def is_installed(self) -> bool:
        target = self.state.target()
        return bool(target) and self.installer.is_installed(target)
