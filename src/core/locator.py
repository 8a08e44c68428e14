import logging
import os
from typing import Callable, Iterable, List, Optional, Sequence
from core.exceptions import LocateError
from utils.game_utils import find_base_folder_from_candidates, find_base_folder_from_log, is_valid_version_dir
SearchStrategy = Callable[[], Optional[str]]
DEFAULT_STRATEGIES: Sequence[SearchStrategy] = (find_base_folder_from_log, find_base_folder_from_candidates)

class InstallationLocator:
    """Finds the game installation and the version folders inside it.

    Search strategies run in order; the first one returning an existing directory wins.
    A failing strategy is logged and skipped so discovery never raises.
    """

    def __init__(self, strategies: Optional[Iterable[SearchStrategy]] = None, version_rule: Callable[[str], bool] = is_valid_version_dir):
        self.strategies = list(strategies) if strategies is not None else list(DEFAULT_STRATEGIES)
        self.version_rule = version_rule

    def auto_find(self) -> Optional[str]:
        for strategy in self.strategies:
            try:
                path = strategy()
            except (LocateError, OSError) as e:
                logging.warning(f'Installation search {getattr(strategy, "__name__", strategy)} failed: {e}')
                continue
            if path and os.path.isdir(path):
                return path
        return None

    def list_versions(self, base_path: Optional[str]) -> List[str]:
        if not base_path or not os.path.isdir(base_path):
            return []
        try:
            entries = os.listdir(base_path)
        except OSError as e:
            logging.warning(f'Failed to list versions in {base_path}: {e}')
            return []
        versions = [name for name in entries if os.path.isdir(os.path.join(base_path, name)) and self.version_rule(os.path.join(base_path, name))]
        return sorted(versions)

def pick_default_version(versions: Sequence[str], stored: Optional[str] = None) -> Optional[str]:
    if stored and stored in versions:
        return stored
    return versions[0] if versions else None
