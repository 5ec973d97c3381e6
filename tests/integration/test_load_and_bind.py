"""End-to-end: source text loaded and bound onto a record."""

import io

import pytest

from envbind import (
    MissingRequiredError,
    SourceFormatError,
    load_and_bind_file,
    load_and_bind_stream,
)
from tests.fixtures.templates import SimpleConfig


class TestLoadAndBindStream:
    """Stream source through to a populated record."""

    def test_scenario_success(self, simple_config):
        """STRING/INT/BOOL source populates the template."""
        source = io.StringIO("STRING=hello\nINT=42\nBOOL=Y\n")
        store: dict[str, str] = {}

        config = load_and_bind_stream(source, simple_config, environ=store)

        assert config == SimpleConfig(String="hello", Count=42, Flag=True)

    def test_scenario_missing_required(self, simple_config):
        """Without a BOOL line the required Flag field fails."""
        with pytest.raises(MissingRequiredError) as exc:
            load_and_bind_stream(
                io.StringIO("STRING=hello\n"), simple_config, environ={}
            )

        assert exc.value.field == "Flag"
        assert exc.value.key == "BOOL"
        # Fields before the failure are already written
        assert simple_config.String == "hello"

    def test_existing_store_values_used(self, simple_config):
        """Values already in the store are bound when the source lacks them."""
        store = {"BOOL": "on", "INT": "7"}
        load_and_bind_stream(io.StringIO("INT=9\n"), simple_config, environ=store)

        assert simple_config.Count == 9
        assert simple_config.Flag is True

    def test_format_error_stops_before_binding(self, simple_config):
        """A malformed source never reaches the binder."""
        with pytest.raises(SourceFormatError):
            load_and_bind_stream(io.StringIO("FOO\n"), simple_config, environ={})

        assert simple_config == SimpleConfig()


class TestLoadAndBindFile:
    """File source through to a populated record."""

    def test_file_scenario(self, env_file, simple_config):
        """A .env file binds like a stream."""
        path = env_file("# app\n\nSTRING = hello\nINT=42\nBOOL=Y\n")

        config = load_and_bind_file(path, simple_config, environ={})

        assert (config.String, config.Count, config.Flag) == ("hello", 42, True)

    def test_process_environment_default(self, env_file, monkeypatch):
        """Without a store the process environment is used."""
        for key in ("STRING", "INT", "BOOL"):
            monkeypatch.setenv(key, "placeholder")
        path = env_file("STRING=env\nINT=1\nBOOL=no\n")

        config = load_and_bind_file(path, SimpleConfig(Flag=True))

        assert (config.String, config.Count, config.Flag) == ("env", 1, False)
