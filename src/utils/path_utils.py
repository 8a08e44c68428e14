import os
import platform

def get_user_data_root() -> str:
    override = os.getenv('SCLOCALIZER_DATA_DIR')
    if override:
        return override
    system = platform.system()
    if system == 'Windows':
        root = os.getenv('LOCALAPPDATA') or os.getenv('APPDATA')
        return os.path.join(root or os.path.expanduser('~'), 'SCLocalizer')
    elif system == 'Darwin':
        return os.path.join(os.path.expanduser('~'), 'Library', 'Application Support', 'SCLocalizer')
    else:
        return os.path.join(os.path.expanduser('~'), '.local', 'share', 'SCLocalizer')

def get_settings_path() -> str:
    return os.path.join(get_user_data_root(), 'config.json')

def get_log_path() -> str:
    return os.path.join(get_user_data_root(), 'sclocalizer.log')

def get_rsi_launcher_log_path() -> str | None:
    appdata = os.getenv('APPDATA')
    if not appdata:
        return None
    return os.path.join(appdata, 'rsilauncher', 'logs', 'log.log')
