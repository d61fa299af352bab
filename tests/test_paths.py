"""Unit tests for sshells.paths."""

import pytest

from sshells.errors import ConfigError, UndefinedVariableError
from sshells.paths import PathResolver

ENV = {
    "SystemRoot": "C:\\Windows",
    "ProgramFiles": "C:\\Program Files",
    "HOME": "/home/ada",
    "USER_2": "ada",
}


@pytest.fixture
def resolver():
    return PathResolver(ENV)


class TestPassThrough:
    @pytest.mark.parametrize(
        "template",
        ["", "/bin/bash", "C:\\Windows\\cmd.exe", "100%", "%", "%%", "% spaced %", "50%-60%"],
    )
    def test_strings_without_tokens_are_unchanged(self, resolver, template):
        assert resolver.resolve(template) == template


class TestSubstitution:
    def test_single_token(self, resolver):
        assert (
            resolver.resolve("%SystemRoot%\\System32\\cmd.exe")
            == "C:\\Windows\\System32\\cmd.exe"
        )

    def test_multiple_distinct_tokens(self, resolver):
        assert resolver.resolve("%HOME%/%USER_2%/.bin") == "/home/ada/ada/.bin"

    def test_repeated_token(self, resolver):
        assert resolver.resolve("%HOME%:%HOME%") == "/home/ada:/home/ada"

    def test_surrounding_characters_untouched(self, resolver):
        assert resolver.resolve("x%HOME%y z") == "x/home/aday z"

    def test_values_are_not_reexpanded(self):
        resolver = PathResolver({"A": "%B%", "B": "nope"})
        assert resolver.resolve("%A%") == "%B%"

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("SSHELLS_TEST_DIR", "/opt/shells")
        assert PathResolver().resolve("%SSHELLS_TEST_DIR%/zsh") == "/opt/shells/zsh"


class TestUndefinedVariable:
    def test_undefined_variable_raises(self, resolver):
        with pytest.raises(UndefinedVariableError) as exc_info:
            resolver.resolve("%NOPE%\\cmd.exe")

        assert exc_info.value.variable == "NOPE"
        assert "NOPE" in str(exc_info.value)

    def test_undefined_after_defined_still_fails(self, resolver):
        with pytest.raises(UndefinedVariableError):
            resolver.resolve("%HOME%/%MISSING%")

    def test_is_a_config_error(self, resolver):
        with pytest.raises(ConfigError):
            resolver.resolve("%MISSING%")


class TestTokenCharacters:
    def test_non_ascii_names_are_not_tokens(self):
        resolver = PathResolver({"ÜBER": "/nope"})

        assert resolver.resolve("%ÜBER%/bin") == "%ÜBER%/bin"

    def test_ascii_word_characters_are_tokens(self):
        resolver = PathResolver({"Tools_64": "/opt"})

        assert resolver.resolve("%Tools_64%/bin") == "/opt/bin"
