from pathlib import Path
import logging
import tempfile
import unittest

from lazyssh_settings.application import SortPreference
from lazyssh_settings.domain import MalformedSettingsError, SettingsUnavailableError, SortMode
from lazyssh_settings.infrastructure import UnavailableSettingsStore, create_settings_store


class TestSortPreference(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.home = Path(self._tmp.name)
        self.log = logging.getLogger("tests.sort_preference")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _preference(self) -> SortPreference:
        store = create_settings_store(home_resolver=lambda: self.home)
        return SortPreference(store, log=self.log)

    def test_changes_survive_reload(self) -> None:
        preference = self._preference()
        self.assertIsNone(preference.load())
        self.assertEqual(preference.current, SortMode.ALIAS_ASC)

        self.assertIsNone(preference.reverse())
        self.assertIsNone(preference.toggle_field())
        self.assertEqual(preference.current, SortMode.LAST_SEEN_DESC)

        reloaded = self._preference()
        reloaded.load()
        self.assertEqual(reloaded.current, SortMode.LAST_SEEN_DESC)

    def test_malformed_file_is_reported_not_raised(self) -> None:
        path = self.home / ".lazyssh" / "settings.json"
        path.parent.mkdir()
        path.write_text("{oops", encoding="utf-8")

        preference = self._preference()
        with self.assertLogs(self.log, level="WARNING"):
            error = preference.load()
        self.assertIsInstance(error, MalformedSettingsError)
        self.assertEqual(preference.current, SortMode.ALIAS_ASC)

        with self.assertLogs(self.log, level="WARNING"):
            error = preference.set(SortMode.ALIAS_DESC)
        self.assertIsInstance(error, MalformedSettingsError)
        self.assertEqual(preference.current, SortMode.ALIAS_DESC)

    def test_unavailable_store_keeps_working_in_memory(self) -> None:
        preference = SortPreference(UnavailableSettingsStore(), log=self.log)
        with self.assertLogs(self.log, level="WARNING"):
            self.assertIsInstance(preference.load(), SettingsUnavailableError)
        with self.assertLogs(self.log, level="WARNING"):
            self.assertIsInstance(preference.set(SortMode.LAST_SEEN_ASC), SettingsUnavailableError)
        self.assertEqual(preference.current, SortMode.LAST_SEEN_ASC)


if __name__ == "__main__":
    unittest.main()
