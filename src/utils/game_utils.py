import ntpath
import os
import platform
import re
import psutil
from config.constants import GAME_DIR_SEGMENTS, GAME_PROCESS_NAMES, VERSION_DATA_DIR, VERSION_LAUNCHER_EXE
from core.exceptions import LocateError
from utils.path_utils import get_rsi_launcher_log_path
_LAUNCH_LINE_RE = re.compile('Launching Star Citizen (?:LIVE|PTU|HOTFIX) from \\((.*?)\\)')

def get_running_game_process() -> str | None:
    for proc in psutil.process_iter(['name']):
        try:
            if proc.info['name'] in GAME_PROCESS_NAMES:
                return proc.info['name']
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
            pass
    return None

def is_valid_version_dir(path: str) -> bool:
    return os.path.isdir(os.path.join(path, VERSION_DATA_DIR)) and os.path.isfile(os.path.join(path, VERSION_LAUNCHER_EXE))

def find_base_folder_from_log(log_path: str | None = None) -> str | None:
    """Installation folder of the last game launch recorded by the RSI launcher.

    The launcher logs ``Launching Star Citizen LIVE from (<version dir>)``;
    the installation is the parent of that version directory.
    """
    log_path = log_path or get_rsi_launcher_log_path()
    if not log_path or not os.path.isfile(log_path):
        return None
    try:
        with open(log_path, 'r', encoding='utf-8', errors='replace') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise LocateError(f'Failed to read launcher log {log_path}: {e}') from e
    for line in reversed(lines):
        if (match := _LAUNCH_LINE_RE.search(line)):
            version_path = match.group(1).strip().rstrip('\\/')
            base_folder = ntpath.dirname(version_path)
            if base_folder and base_folder != version_path:
                return base_folder
    return None

def get_default_install_candidates() -> list[str]:
    system = platform.system()
    paths = []
    if system == 'Windows':
        program_files = ['C:\\Program Files', 'C:\\Program Files (x86)']
        drive_roots = [f'{d}:\\' for d in 'CDEF']
        paths.extend((os.path.join(p, *GAME_DIR_SEGMENTS) for p in program_files + drive_roots))
    elif system == 'Linux':
        home = os.path.expanduser('~')
        paths.append(os.path.join(home, 'Games', 'star-citizen', 'drive_c', 'Program Files', *GAME_DIR_SEGMENTS))
    return paths

def find_base_folder_from_candidates() -> str | None:
    return next((p for p in get_default_install_candidates() if os.path.isdir(p)), None)
