"""Tests for launch strategy selection and Exec expansion."""

import pytest
from pathlib import Path

from src.core.models import BrowserEntry
from src.execution.launch_resolver import (
    LaunchAction,
    LaunchError,
    LaunchResolver,
    LaunchStrategy,
    detect_available_strategies,
    expand_exec,
)

URL = "https://example.com/a?b=1&c=$(rm -rf ~)"


@pytest.fixture
def firefox_entry() -> BrowserEntry:
    return BrowserEntry(
        id="firefox",
        display_name="Firefox",
        description="Mozilla Firefox web browser",
        exec_template="/usr/lib/firefox/firefox %u",
        source_path=Path("/usr/share/applications/firefox.desktop"),
    )


def _entry_with_exec(exec_template: str) -> BrowserEntry:
    return BrowserEntry("test", "Test", "", exec_template, Path("/apps/test.desktop"))


class TestDetectAvailableStrategies:
    """Tests for helper probing."""

    def test_all_helpers_present(self):
        available = detect_available_strategies(which=lambda name: f"/usr/bin/{name}")
        assert available == set(LaunchStrategy)

    def test_no_helpers(self):
        available = detect_available_strategies(which=lambda name: None)
        assert available == {LaunchStrategy.DIRECT_EXEC}

    def test_only_gio(self):
        available = detect_available_strategies(
            which=lambda name: "/usr/bin/gio" if name == "gio" else None
        )
        assert available == {LaunchStrategy.DESCRIPTOR_OPENER, LaunchStrategy.DIRECT_EXEC}


class TestLaunchResolver:
    """Tests for LaunchResolver.resolve()."""

    def test_prefers_desktop_launcher(self, firefox_entry):
        resolver = LaunchResolver(available=set(LaunchStrategy))
        action = resolver.resolve(firefox_entry, URL)

        assert action.strategy is LaunchStrategy.DESKTOP_LAUNCHER
        assert action.argv == ("gtk-launch", "firefox", URL)
        assert action.browser_id == "firefox"

    def test_descriptor_opener_when_gtk_launch_missing(self, firefox_entry):
        """Without gtk-launch but with gio, gio launch is used."""
        resolver = LaunchResolver(
            available={LaunchStrategy.DESCRIPTOR_OPENER, LaunchStrategy.DIRECT_EXEC}
        )
        action = resolver.resolve(firefox_entry, URL)

        assert action.strategy is LaunchStrategy.DESCRIPTOR_OPENER
        assert action.argv == (
            "gio",
            "launch",
            "/usr/share/applications/firefox.desktop",
            URL,
        )

    def test_direct_exec_when_no_helpers(self, firefox_entry):
        """The URL is a single argv element, never shell-interpreted."""
        resolver = LaunchResolver(available=set())
        action = resolver.resolve(firefox_entry, URL)

        assert action.strategy is LaunchStrategy.DIRECT_EXEC
        assert action.argv == ("/usr/lib/firefox/firefox", URL)

    def test_direct_exec_always_available(self):
        resolver = LaunchResolver(available=[])
        assert LaunchStrategy.DIRECT_EXEC in resolver.available

    def test_probes_helpers_when_not_given(self, monkeypatch):
        monkeypatch.setattr(
            "src.execution.launch_resolver.detect_available_strategies",
            lambda: frozenset({LaunchStrategy.DESCRIPTOR_OPENER, LaunchStrategy.DIRECT_EXEC}),
        )
        resolver = LaunchResolver()
        assert resolver.select_strategy() is LaunchStrategy.DESCRIPTOR_OPENER

    def test_unbalanced_quotes_raise_launch_error(self):
        resolver = LaunchResolver(available=set())

        with pytest.raises(LaunchError) as exc_info:
            resolver.resolve(_entry_with_exec('"firefox %u'), URL)

        assert exc_info.value.strategy is LaunchStrategy.DIRECT_EXEC
        assert exc_info.value.browser_id == "test"
        assert exc_info.value.command == '"firefox %u'

    def test_exec_with_only_field_codes_raises(self):
        resolver = LaunchResolver(available=set())

        with pytest.raises(LaunchError, match="no command"):
            resolver.resolve(_entry_with_exec("%i %c"), URL)

    def test_helper_strategies_ignore_broken_exec(self):
        """A broken Exec line does not matter when a helper is used."""
        resolver = LaunchResolver(available={LaunchStrategy.DESKTOP_LAUNCHER})
        action = resolver.resolve(_entry_with_exec('"broken'), URL)
        assert action.strategy is LaunchStrategy.DESKTOP_LAUNCHER


class TestExpandExec:
    """Tests for expand_exec()."""

    @pytest.mark.parametrize("code", ["%u", "%U", "%f", "%F"])
    def test_url_codes_become_separate_argument(self, code):
        assert expand_exec(f"browser {code}", URL) == ["browser", URL]

    def test_unknown_codes_removed(self):
        argv = expand_exec("browser --name %c %k %i %u", URL)
        assert argv == ["browser", "--name", URL]
        assert not any("%" in a for a in argv[:-1])

    def test_embedded_code_replaced_in_place(self):
        assert expand_exec("browser --url=%u", "https://e.com") == ["browser", "--url=https://e.com"]

    def test_escaped_percent(self):
        assert expand_exec("browser --fmt=100%% %u", "https://e.com") == [
            "browser",
            "--fmt=100%",
            "https://e.com",
        ]

    def test_quoted_program_path(self):
        argv = expand_exec('"/opt/My Browser/browser" --new-tab %U', "https://e.com")
        assert argv == ["/opt/My Browser/browser", "--new-tab", "https://e.com"]

    def test_flatpak_exec_line(self):
        argv = expand_exec(
            "/usr/bin/flatpak run --branch=stable --command=firefox org.mozilla.firefox @@u %u @@",
            "https://e.com",
        )
        assert argv[-3:] == ["@@u", "https://e.com", "@@"]

    def test_no_url_code_does_not_append_url(self):
        assert expand_exec("browser --new-window", "https://e.com") == ["browser", "--new-window"]

    def test_url_with_percent_escapes_untouched(self):
        """Percent sequences inside the URL are not treated as field codes."""
        url = "https://e.com/?q=%41%75"
        assert expand_exec("browser %u", url) == ["browser", url]

    def test_unbalanced_quotes_raise_value_error(self):
        with pytest.raises(ValueError):
            expand_exec("'browser %u", URL)


class TestLaunchAction:
    def test_command_line_is_shell_quoted(self):
        action = LaunchAction(LaunchStrategy.DIRECT_EXEC, "firefox", ("firefox", "https://e.com/?a=1&b=2"))
        assert action.command_line == "firefox 'https://e.com/?a=1&b=2'"
