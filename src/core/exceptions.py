"""
Exceptions raised by the localization core.
"""

class LocalizerError(Exception):
    """Base exception for SCLocalizer."""
    pass

class SettingsReadError(LocalizerError):
    """Raised when the settings file cannot be read or parsed."""
    pass

class SettingsWriteError(LocalizerError):
    """Raised when the settings file cannot be written."""
    pass

class LocateError(LocalizerError):
    """Raised when an installation search strategy fails."""
    pass

class DownloadError(LocalizerError):
    """Raised when the translation file cannot be downloaded."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code

class FileWriteError(LocalizerError):
    """Raised when a localization file or user.cfg cannot be written."""
    pass

class FileDeleteError(LocalizerError):
    """Raised when a localization file or user.cfg line cannot be removed."""
    pass

class InvalidVersionError(LocalizerError):
    """Raised when the selected version folder does not exist."""
    pass

class OperationInProgressError(LocalizerError):
    """Raised when install or remove is started while another one runs."""
    pass

class ValidationError(LocalizerError):
    """Raised when a required selection (folder, version, language) is missing."""
    pass
