import argparse
import logging
import os
import platform
import sys
import tempfile
import psutil
from core.controller import LocalizerController
from core.exceptions import LocalizerError
from utils.game_utils import get_running_game_process
from utils.path_utils import get_log_path
_lock_file = None

def setup_logging(debug: bool = False):
    handlers = [logging.StreamHandler()]
    try:
        log_path = get_log_path()
        os.makedirs(os.path.dirname(log_path), exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))
    except OSError:
        pass
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s', handlers=handlers, force=True)

def get_lock_path() -> str:
    return os.path.join(tempfile.gettempdir(), 'sclocalizer.lock')

def _read_lock_pid(lock_file_path: str) -> int | None:
    try:
        with open(lock_file_path, 'r') as f:
            return int(f.read().strip())
    except (OSError, ValueError):
        return None

def check_single_instance(lock_file_path: str | None = None) -> bool:
    """Takes the instance lock. False while the PID recorded in it is alive."""
    global _lock_file
    lock_file_path = lock_file_path or get_lock_path()
    if os.path.exists(lock_file_path):
        pid = _read_lock_pid(lock_file_path)
        if pid is not None and psutil.pid_exists(pid):
            return False
        try:
            os.remove(lock_file_path)
        except OSError as e:
            logging.warning(f'Failed to remove stale lock {lock_file_path}: {e}')
    try:
        _lock_file = open(lock_file_path, 'w')
        _lock_file.write(str(os.getpid()))
        _lock_file.flush()
        return True
    except OSError:
        return False

def release_single_instance(lock_file_path: str | None = None):
    global _lock_file
    lock_file_path = lock_file_path or get_lock_path()
    if _lock_file is not None:
        _lock_file.close()
        _lock_file = None
    if _read_lock_pid(lock_file_path) == os.getpid():
        try:
            os.remove(lock_file_path)
        except OSError as e:
            logging.warning(f'Failed to remove lock {lock_file_path}: {e}')

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Star Citizen localization manager')
    parser.add_argument('--folder', type=str, help='Star Citizen base folder (.../Roberts Space Industries/StarCitizen)')
    parser.add_argument('--version', dest='game_version', type=str, help='Installed game version folder, e.g. LIVE or PTU')
    parser.add_argument('--language', type=str, help='Game language code, e.g. korean_(south_korea)')
    action = parser.add_mutually_exclusive_group()
    action.add_argument('--install', action='store_true', help='Download and install the localization, then exit')
    action.add_argument('--remove', action='store_true', help='Remove the localization, then exit')
    action.add_argument('--list-versions', action='store_true', help='Print the detected game versions, then exit')
    parser.add_argument('--force-start', action='store_true', help='Start even if the game or another instance is running')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    return parser

def apply_cli_selection(controller: LocalizerController, args):
    controller.startup()
    if args.folder:
        controller.change_folder(args.folder)
    if args.game_version:
        controller.select_version(args.game_version)
    if args.language:
        controller.select_language(args.language)
    return controller.state

def run_cli(args, controller=None) -> int:
    controller = controller or LocalizerController()
    try:
        state = apply_cli_selection(controller, args)
        if args.list_versions:
            if not state.base_folder:
                print('Star Citizen base folder not found. Pass --folder.', file=sys.stderr)
                return 1
            for version in state.versions:
                marker = '*' if version == state.selected_version else ' '
                print(f'{marker} {version}')
            return 0
        if args.install:
            localization_dir = controller.install()
            print(f'Localization installed into {localization_dir}')
        elif args.remove:
            controller.remove()
            print('Localization removed.')
        return 0
    except LocalizerError as e:
        logging.error(str(e))
        print(f'Error: {e}', file=sys.stderr)
        return 1

def run_gui(args) -> int:
    from PyQt6.QtWidgets import QApplication, QMessageBox
    from config.constants import APP_NAME, LAUNCHER_VERSION
    from ui.main_window import LocalizerWindow
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(LAUNCHER_VERSION)
    if not args.force_start and (not check_single_instance()):
        QMessageBox.critical(None, 'Already running', 'SCLocalizer is already running.')
        return 1
    app.aboutToQuit.connect(release_single_instance)
    window = LocalizerWindow(LocalizerController())
    window.show()
    window.perform_initial_setup()
    return app.exec()

def run_app(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    is_cli = args.install or args.remove or args.list_versions
    if not args.force_start and (args.install or args.remove):
        running_game = get_running_game_process()
        if running_game:
            print(f'{running_game} is running. Close the game before patching it, or pass --force-start.', file=sys.stderr)
            sys.exit(1)
    if is_cli:
        sys.exit(run_cli(args))
    if platform.system() == 'Linux':
        os.environ.setdefault('NO_AT_BRIDGE', '1')
    sys.exit(run_gui(args))
