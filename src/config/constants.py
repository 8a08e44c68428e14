import os
import sys
from dotenv import load_dotenv
LAUNCHER_VERSION = '1.2.0'
APP_NAME = 'SCLocalizer'

def _load_config_sources():
    root_env = os.path.join(os.path.dirname(__file__), '..', '..', '.env')
    if os.path.exists(root_env):
        load_dotenv(root_env)
    else:
        load_dotenv()
    try:
        if getattr(sys, 'frozen', False):
            exe_dir = os.path.dirname(sys.executable)
        else:
            exe_dir = os.path.abspath('.')
        cfg_path = os.path.join(exe_dir, 'config.env')
        if os.path.exists(cfg_path):
            load_dotenv(cfg_path)
    except OSError:
        pass
_load_config_sources()
SERVER_URL = os.getenv('SERVER_URL', '')
TRANSLATION_FILE_NAME = 'translation.ini'
TRANSLATION_TARGET_NAME = 'global.ini'
USER_CFG_NAME = 'user.cfg'
LANGUAGE_CFG_KEY = 'g_language'
LOCALIZATION_SUBPATH = ('data', 'Localization')
VERSION_DATA_DIR = 'data'
VERSION_LAUNCHER_EXE = 'StarCitizen_Launcher.exe'
DOWNLOAD_TIMEOUT = 30
GAME_DIR_SEGMENTS = ('Roberts Space Industries', 'StarCitizen')
GAME_PROCESS_NAMES = ['StarCitizen.exe', 'StarCitizen', 'StarCitizen_Launcher.exe']
APP_LANGUAGES = {'en': 'English', 'ru': 'Русский'}
DEFAULT_APP_LANGUAGE = 'en'
UI_COLORS = {'status_error': 'red', 'status_warning': 'orange', 'status_success': 'green', 'status_info': 'gray'}
BROWSER_HEADERS = {'User-Agent': f'{APP_NAME}/{LAUNCHER_VERSION}'}
