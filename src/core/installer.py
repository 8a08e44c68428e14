import logging
import os
import threading
from contextlib import contextmanager
from typing import Callable
from config.constants import LANGUAGE_CFG_KEY, SERVER_URL, TRANSLATION_FILE_NAME, VERSION_DATA_DIR
from core.exceptions import FileDeleteError, FileWriteError, InvalidVersionError, OperationInProgressError
from models.settings_models import LocalizationTarget
from utils.file_utils import has_config_line, read_text_file, remove_config_line, remove_tree, set_config_line, write_text_file
from utils.network_utils import fetch_translation
Fetcher = Callable[[str], str]

def default_fetcher(version: str) -> str:
    return fetch_translation(SERVER_URL, version, TRANSLATION_FILE_NAME)

class LocalizationInstaller:
    """Applies and removes the g_language override of one game version.

    Install downloads first, so a failed download leaves the game folder
    untouched. Neither operation rolls back a write that fails midway.
    """

    def __init__(self, fetcher: Fetcher = default_fetcher):
        self.fetcher = fetcher
        self._lock = threading.Lock()

    @contextmanager
    def _exclusive(self):
        if not self._lock.acquire(blocking=False):
            raise OperationInProgressError('Another install or remove operation is still running')
        try:
            yield
        finally:
            self._lock.release()

    @staticmethod
    def _check_version_dir(target: LocalizationTarget):
        if not os.path.isdir(os.path.join(target.version_dir, VERSION_DATA_DIR)):
            raise InvalidVersionError(f'Specified version folder {target.version_dir} does not exist or is invalid.')

    def install(self, target: LocalizationTarget) -> str:
        with self._exclusive():
            self._check_version_dir(target)
            content = self.fetcher(target.version)
            try:
                os.makedirs(target.localization_dir, exist_ok=True)
            except OSError as e:
                raise FileWriteError(f'Failed to create localization folder at {target.localization_dir}: {e}') from e
            try:
                original = read_text_file(target.user_cfg_path)
                write_text_file(target.user_cfg_path, set_config_line(original, LANGUAGE_CFG_KEY, target.language_code))
            except OSError as e:
                raise FileWriteError(f'Failed to write to user.cfg at {target.user_cfg_path}: {e}') from e
            try:
                write_text_file(target.translation_file_path, content)
            except OSError as e:
                raise FileWriteError(f'Failed to write file {target.translation_file_path}: {e}') from e
            logging.info(f'Installed {target.language_code} localization for {target.version} into {target.localization_dir}')
            return target.localization_dir

    def remove(self, target: LocalizationTarget):
        with self._exclusive():
            self._check_version_dir(target)
            try:
                if remove_tree(target.localization_dir):
                    logging.info(f'Deleted localization folder {target.localization_dir}')
            except OSError as e:
                raise FileDeleteError(f'Failed to delete localization folder at {target.localization_dir}: {e}') from e
            if not os.path.exists(target.user_cfg_path):
                return
            try:
                new_content, changed = remove_config_line(read_text_file(target.user_cfg_path), LANGUAGE_CFG_KEY)
                if changed:
                    write_text_file(target.user_cfg_path, new_content)
            except OSError as e:
                raise FileDeleteError(f'Failed to write updated user.cfg at {target.user_cfg_path}: {e}') from e

    def is_installed(self, target: LocalizationTarget) -> bool:
        if not os.path.isfile(target.translation_file_path):
            return False
        try:
            return has_config_line(read_text_file(target.user_cfg_path), LANGUAGE_CFG_KEY, target.language_code)
        except OSError:
            return False
