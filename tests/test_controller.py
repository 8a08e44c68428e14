import pytest

from core.controller import LocalizerController
from core.exceptions import DownloadError, ValidationError
from core.installer import LocalizationInstaller
from core.locator import InstallationLocator
from core.settings_store import SettingsStore
from models.languages import DEFAULT_LANGUAGE_CODE
from models.settings_models import Settings

KOREAN = "korean_(south_korea)"


class FixedLocator(InstallationLocator):
    def __init__(self, found, versions):
        super().__init__(strategies=[])
        self.found = found
        self.versions = versions

    def auto_find(self):
        return self.found

    def list_versions(self, base_path):
        return list(self.versions) if base_path else []


def make_controller(tmp_path, locator, fetcher=lambda version: "text"):
    store = SettingsStore(str(tmp_path / "settings" / "config.json"))
    return LocalizerController(store=store, locator=locator, installer=LocalizationInstaller(fetcher)), store


def test_startup_without_settings_uses_auto_find_and_first_version(tmp_path):
    controller, store = make_controller(tmp_path, FixedLocator("/games/StarCitizen", ["4.0", "3.24"]))

    state = controller.startup()

    assert controller.auto_found
    assert state.base_folder == "/games/StarCitizen"
    assert state.versions == ("4.0", "3.24")
    assert state.selected_version == "4.0"
    assert state.language_code == DEFAULT_LANGUAGE_CODE
    assert state.app_language == "en"
    assert store.read().base_folder_path == "/games/StarCitizen"


def test_startup_prefers_stored_settings(tmp_path):
    controller, store = make_controller(tmp_path, FixedLocator("/auto/found", ["LIVE", "PTU"]))
    store.write(Settings(base_folder_path="/stored", selected_version="PTU", selected_language_code="german_(germany)", app_language="ru"))

    state = controller.startup()

    assert not controller.auto_found
    assert state.base_folder == "/stored"
    assert state.selected_version == "PTU"
    assert state.language_code == "german_(germany)"
    assert state.app_language == "ru"


def test_startup_ignores_unknown_stored_language(tmp_path):
    controller, store = make_controller(tmp_path, FixedLocator(None, []))
    store.write(Settings(selected_language_code="klingon", app_language="tlh"))

    state = controller.startup()

    assert state.base_folder is None
    assert state.selected_version is None
    assert state.language_code == DEFAULT_LANGUAGE_CODE
    assert state.app_language == "en"


def test_fresh_install_scenario(tmp_path, game_folder, make_version):
    make_version(game_folder, "4.0")
    controller, store = make_controller(tmp_path, InstallationLocator(strategies=[lambda: str(game_folder)]), fetcher=lambda version: "translated")

    state = controller.startup()
    controller.select_language(KOREAN)
    localization_dir = controller.install()

    assert state.versions == ("4.0",)
    assert (game_folder / "4.0" / "user.cfg").read_text(encoding="utf-8") == f"g_language={KOREAN}\n"
    assert (game_folder / "4.0" / "data" / "Localization" / KOREAN / "global.ini").read_text(encoding="utf-8") == "translated"
    assert localization_dir.endswith(KOREAN)
    assert controller.is_installed()
    assert store.read().selected_language_code == KOREAN


def test_install_download_failure_propagates(tmp_path, game_folder, make_version):
    make_version(game_folder, "4.0")

    def failing(version):
        raise DownloadError("404 Not Found", status_code=404)

    controller, _ = make_controller(tmp_path, InstallationLocator(strategies=[lambda: str(game_folder)]), fetcher=failing)
    controller.startup()

    with pytest.raises(DownloadError):
        controller.install()


def test_remove_clears_stored_language_but_keeps_folder_and_version(tmp_path, game_folder, make_version):
    make_version(game_folder, "LIVE")
    controller, store = make_controller(tmp_path, InstallationLocator(strategies=[lambda: str(game_folder)]))
    controller.startup()
    controller.install()

    controller.remove()

    stored = store.read()
    assert stored.base_folder_path == str(game_folder)
    assert stored.selected_version == "LIVE"
    assert stored.selected_language_code is None
    assert controller.state.language_code == DEFAULT_LANGUAGE_CODE
    assert not controller.is_installed()


def test_install_requires_folder_and_version(tmp_path):
    controller, _ = make_controller(tmp_path, FixedLocator(None, []))
    controller.startup()

    with pytest.raises(ValidationError):
        controller.install()
    with pytest.raises(ValidationError):
        controller.remove()


def test_change_folder_rediscovers_versions(tmp_path, game_folder, make_version):
    make_version(game_folder, "PTU")
    make_version(game_folder, "LIVE")
    controller, store = make_controller(tmp_path, InstallationLocator(strategies=[]))
    controller.startup()

    state = controller.change_folder(str(game_folder))

    assert state.versions == ("LIVE", "PTU")
    assert state.selected_version == "LIVE"
    assert store.read().base_folder_path == str(game_folder)


def test_change_folder_rejects_missing_directory(tmp_path):
    controller, _ = make_controller(tmp_path, InstallationLocator(strategies=[]))
    controller.startup()

    with pytest.raises(ValidationError):
        controller.change_folder(str(tmp_path / "missing"))


def test_selections_are_validated_and_persisted(tmp_path):
    controller, store = make_controller(tmp_path, FixedLocator("/games/StarCitizen", ["LIVE", "PTU"]))
    controller.startup()

    controller.select_version("PTU")
    controller.select_language("english")
    controller.select_app_language("ru")

    assert store.read() == Settings(base_folder_path="/games/StarCitizen", selected_language_code="english", selected_version="PTU", app_language="ru")
    with pytest.raises(ValidationError):
        controller.select_version("EPTU")
    with pytest.raises(ValidationError):
        controller.select_language("klingon")
    with pytest.raises(ValidationError):
        controller.select_app_language("de")


def test_failed_settings_write_does_not_break_operations(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    controller = LocalizerController(
        store=SettingsStore(str(blocker / "config.json")),
        locator=FixedLocator("/games/StarCitizen", ["LIVE"]),
        installer=LocalizationInstaller(lambda version: "x"),
    )

    state = controller.startup()

    assert state.selected_version == "LIVE"
    assert controller.last_write is not None
    assert not controller.last_write.ok


def test_refresh_versions_keeps_selection_when_still_installed(tmp_path, game_folder, make_version):
    make_version(game_folder, "LIVE")
    make_version(game_folder, "PTU")
    controller, _ = make_controller(tmp_path, InstallationLocator(strategies=[lambda: str(game_folder)]))
    controller.startup()
    controller.select_version("PTU")
    make_version(game_folder, "EPTU")

    state = controller.refresh_versions()

    assert state.versions == ("EPTU", "LIVE", "PTU")
    assert state.selected_version == "PTU"
