"""Tests for value providers."""

from envbind.binding.providers import environ_provider, mapping_provider


class TestMappingProvider:
    """In-memory provider."""

    def test_found_missing_and_empty_are_distinct(self):
        """Absent keys give None, empty values give an empty string."""
        provider = mapping_provider({"A": "1", "EMPTY": ""})

        assert provider("A") == "1"
        assert provider("EMPTY") == ""
        assert provider("MISSING") is None

    def test_reads_mapping_at_lookup_time(self):
        """Changes to the mapping are visible to the provider."""
        values: dict[str, str] = {}
        provider = mapping_provider(values)
        values["LATE"] = "value"

        assert provider("LATE") == "value"


class TestEnvironProvider:
    """Process environment provider."""

    def test_reads_process_environment(self, monkeypatch):
        """Values come from os.environ."""
        monkeypatch.setenv("ENVBIND_TEST_VALUE", "from-env")
        monkeypatch.delenv("ENVBIND_TEST_MISSING", raising=False)
        provider = environ_provider()

        assert provider("ENVBIND_TEST_VALUE") == "from-env"
        assert provider("ENVBIND_TEST_MISSING") is None

    def test_sees_later_changes(self, monkeypatch):
        """Variables set after creation are visible."""
        provider = environ_provider()
        monkeypatch.setenv("ENVBIND_TEST_LATE", "later")

        assert provider("ENVBIND_TEST_LATE") == "later"
