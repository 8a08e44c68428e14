import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from config.constants import LANGUAGE_CFG_KEY, LOCALIZATION_SUBPATH, TRANSLATION_TARGET_NAME, USER_CFG_NAME

@dataclass(frozen=True)
class Settings:
    base_folder_path: Optional[str] = None
    selected_language_code: Optional[str] = None
    selected_version: Optional[str] = None
    app_language: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Settings':
        if not isinstance(data, dict):
            return cls()

        def _str(key: str) -> Optional[str]:
            value = data.get(key)
            return value if isinstance(value, str) and value else None
        return cls(base_folder_path=_str('base_folder_path'), selected_language_code=_str('selected_language_code'), selected_version=_str('selected_version'), app_language=_str('app_language'))

    def to_dict(self) -> Dict[str, str]:
        data = {'base_folder_path': self.base_folder_path, 'selected_language_code': self.selected_language_code, 'selected_version': self.selected_version, 'app_language': self.app_language}
        return {k: v for k, v in data.items() if v is not None}

@dataclass(frozen=True)
class WriteResult:
    ok: bool
    error: Optional[str] = None

@dataclass(frozen=True)
class LanguageOption:
    name: str
    code: str
    is_recommended: bool = False

    def display_name(self, recommended_label: str = 'recommended') -> str:
        return f'{self.name} ({recommended_label})' if self.is_recommended else self.name

@dataclass(frozen=True)
class LocalizationTarget:
    """One (base folder, version, language code) override and the paths it owns."""
    base_folder: str
    version: str
    language_code: str

    @property
    def version_dir(self) -> str:
        return os.path.join(self.base_folder, self.version)

    @property
    def user_cfg_path(self) -> str:
        return os.path.join(self.version_dir, USER_CFG_NAME)

    @property
    def localization_dir(self) -> str:
        return os.path.join(self.version_dir, *LOCALIZATION_SUBPATH, self.language_code)

    @property
    def translation_file_path(self) -> str:
        return os.path.join(self.localization_dir, TRANSLATION_TARGET_NAME)

    @property
    def config_line(self) -> str:
        return f'{LANGUAGE_CFG_KEY}={self.language_code}'

@dataclass(frozen=True)
class AppState:
    base_folder: Optional[str] = None
    versions: Tuple[str, ...] = field(default_factory=tuple)
    selected_version: Optional[str] = None
    language_code: str = ''
    app_language: str = ''

    def to_settings(self, keep_language: bool = True) -> Settings:
        return Settings(base_folder_path=self.base_folder, selected_language_code=self.language_code if keep_language and self.language_code else None, selected_version=self.selected_version, app_language=self.app_language or None)

    def target(self) -> Optional[LocalizationTarget]:
        if not self.base_folder or not self.selected_version:
            return None
        return LocalizationTarget(self.base_folder, self.selected_version, self.language_code)
