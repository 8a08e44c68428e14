import json
import logging
import os
import threading
from typing import Optional
from core.exceptions import SettingsReadError, SettingsWriteError
from models.settings_models import Settings, WriteResult
from utils.path_utils import get_settings_path

class SettingsStore:
    """JSON settings file. Reads fall back to empty settings, writes report a WriteResult."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or get_settings_path()

    def read(self) -> Settings:
        try:
            return Settings.from_dict(self._read_json())
        except SettingsReadError as e:
            logging.warning(f'Failed to read settings {self.path}: {e}')
            return Settings()

    def write(self, settings: Settings) -> WriteResult:
        try:
            self._write_json(settings.to_dict())
            return WriteResult(ok=True)
        except SettingsWriteError as e:
            logging.error(f'Failed to write settings {self.path}: {e}')
            return WriteResult(ok=False, error=str(e))

    def _read_json(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SettingsReadError(str(e)) from e
        if not isinstance(data, dict):
            raise SettingsReadError(f'expected a JSON object, got {type(data).__name__}')
        return data

    def _write_json(self, data: dict):
        tmp = f'{self.path}.{os.getpid()}.{threading.get_ident()}.tmp'
        try:
            dir_path = os.path.dirname(self.path)
            if dir_path:
                os.makedirs(dir_path, exist_ok=True)
            with open(tmp, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                os.remove(tmp)
            except OSError:
                pass
            raise SettingsWriteError(str(e)) from e
