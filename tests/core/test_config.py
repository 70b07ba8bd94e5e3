"""Tests for configuration loading and logging setup."""

import tomllib

import pytest
from loguru import logger

from gridscroll.core.config import (
    Config,
    ScrolledConfig,
    create_default_config,
    get_config_path,
    load_config,
)
from gridscroll.core.errors import ConfigError
from gridscroll.core.output import setup_loguru
from gridscroll.grid import Block, Buffer, Rect
from gridscroll.scroll import (
    HScrollPosition,
    Scroll,
    ScrollbarOrientation,
    ScrollbarPolicy,
    ScrollbarType,
    Scrolled,
    VScrollPosition,
)


class TestLoadConfig:
    """Test reading the TOML configuration."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """No file means default configuration."""
        assert load_config(tmp_path / "missing.toml") == Config()

    def test_values_parsed(self, tmp_path):
        """Every section is read into its dataclass."""
        path = tmp_path / "config.toml"
        path.write_text(
            """
[scrollbar]
policy = "show"
start_margin = 1
scroll_by = 3

[scrolled]
h_policy = "never"
v_policy = "ALWAYS"
v_position = "left"
h_position = "top"
v_overscroll = 2
bordered = true

[style]
thumb_symbol = "#"
thumb_style = "bold red"

[logging]
level = "debug"
console_output = true
"""
        )
        config = load_config(path)

        assert config.scrollbar.policy is ScrollbarType.SHOW
        assert config.scrollbar.start_margin == 1
        assert config.scrollbar.scroll_by == 3
        assert config.scrollbar.overscroll_by is None
        assert config.scrolled.h_policy is ScrollbarPolicy.NEVER
        assert config.scrolled.v_policy is ScrollbarPolicy.ALWAYS
        assert config.scrolled.v_position is VScrollPosition.LEFT
        assert config.scrolled.h_position is HScrollPosition.TOP
        assert config.scrolled.v_overscroll == 2
        assert config.scrolled.bordered is True
        assert config.style.thumb_symbol == "#"
        assert config.logging.level == "DEBUG"
        assert config.logging.console_output is True

    def test_invalid_value_falls_back(self, tmp_path, log_messages):
        """Invalid values are logged and replaced by defaults."""
        path = tmp_path / "config.toml"
        path.write_text('[scrolled]\nv_policy = "sometimes"\n\n[style]\nthumb_style = "not a style at all"\n')

        config = load_config(path)

        assert config.scrolled.v_policy is ScrollbarPolicy.AS_NEEDED
        assert config.style.thumb_style is None
        warnings = [r for r in log_messages if r["level"].name == "WARNING"]
        assert len(warnings) == 2

    def test_invalid_value_strict(self, tmp_path):
        """Strict loading raises ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('[scrollbar]\npolicy = "sometimes"\n')
        with pytest.raises(ConfigError, match="scrollbar.policy"):
            load_config(path, strict=True)

    def test_section_not_a_table(self, tmp_path, log_messages):
        """A section given as a plain value is ignored with a warning."""
        path = tmp_path / "config.toml"
        path.write_text('scrollbar = "x"\n\n[scrolled]\nv_overscroll = 1\n')

        config = load_config(path)

        assert config.scrollbar == Config().scrollbar
        assert config.scrolled.v_overscroll == 1
        warnings = [r["message"] for r in log_messages if r["level"].name == "WARNING"]
        assert any("[scrollbar]" in message for message in warnings)

    def test_wrongly_typed_values_fall_back(self, tmp_path):
        """Values of the wrong type keep their defaults."""
        path = tmp_path / "config.toml"
        path.write_text(
            """
[scrollbar]
start_margin = true
scroll_by = "3"
end_margin = -1

[scrolled]
v_overscroll = "2"
bordered = "yes"

[style]
thumb_symbol = 5
thumb_style = 7

[logging]
level = 10
console_output = 1
"""
        )

        config = load_config(path)

        assert config == Config()

    def test_unknown_log_level_falls_back(self, tmp_path):
        """Only loguru level names are accepted."""
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "verbose"\n')
        assert load_config(path).logging.level == "INFO"

    @pytest.mark.parametrize(
        "content, key",
        [
            ('scrolled = 3\n', "[scrolled]"),
            ('[scrolled]\nv_overscroll = "2"\n', "scrolled.v_overscroll"),
            ('[logging]\nlevel = 10\n', "logging.level"),
            ('[scrollbar]\nend_margin = -1\n', "scrollbar.end_margin"),
        ],
    )
    def test_wrongly_typed_values_strict(self, tmp_path, content, key):
        """Strict loading names the offending setting."""
        path = tmp_path / "config.toml"
        path.write_text(content)
        with pytest.raises(ConfigError) as exc_info:
            load_config(path, strict=True)
        assert key in str(exc_info.value)

    def test_wrong_overscroll_type_does_not_reach_widget(self, tmp_path, make_list):
        """A string overscroll is dropped before a Scrolled is built from it."""
        path = tmp_path / "config.toml"
        path.write_text('[scrolled]\nv_overscroll = "2"\n')
        widget, list_state = make_list(30)
        scrolled = Scrolled.from_config(widget, load_config(path))
        state = scrolled.create_state(list_state)
        buf = Buffer.empty(Rect(0, 0, 10, 10))
        scrolled.render(buf.area, buf, state)

        assert state.set_vertical_offset(100)
        assert state.vertical_offset() == 20

    def test_broken_toml(self, tmp_path):
        """Unparseable files give defaults, or ConfigError when strict."""
        path = tmp_path / "config.toml"
        path.write_text("[scrolled\n")
        assert load_config(path) == Config()
        with pytest.raises(ConfigError):
            load_config(path, strict=True)

    def test_config_path_from_environment(self, tmp_path, monkeypatch):
        """GRIDSCROLL_CONFIG wins over the XDG location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.delenv("GRIDSCROLL_CONFIG", raising=False)
        assert get_config_path() == tmp_path / "xdg" / "gridscroll" / "config.toml"

        monkeypatch.setenv("GRIDSCROLL_CONFIG", str(tmp_path / "custom.toml"))
        assert get_config_path() == tmp_path / "custom.toml"

    def test_default_config_matches_defaults(self, tmp_path):
        """The generated default file loads to the built-in defaults."""
        text = create_default_config()
        tomllib.loads(text)
        path = tmp_path / "config.toml"
        path.write_text(text)
        assert load_config(path, strict=True) == Config()


class TestFromConfig:
    """Test building widgets from configuration."""

    def test_scrolled_from_config(self, make_list):
        """Policies, positions, border and style come from the config."""
        widget, _ = make_list(3)
        config = Config(
            scrolled=ScrolledConfig(
                v_policy=ScrollbarPolicy.ALWAYS,
                v_position=VScrollPosition.LEFT,
                h_overscroll=4,
                bordered=True,
            )
        )
        config.style.thumb_symbol = "#"
        config.style.track_style = "dim"

        scrolled = Scrolled.from_config(widget, config)

        assert scrolled.v_scroll_policy is ScrollbarPolicy.ALWAYS
        assert scrolled.v_scroll_position is VScrollPosition.LEFT
        assert scrolled.h_overscroll == 4
        assert isinstance(scrolled.block, Block)
        assert scrolled.style.thumb_symbol == "#"
        assert scrolled.style.track_style.dim

    def test_scroll_from_config(self):
        """Scroll takes its settings from the [scrollbar] section."""
        config = Config()
        config.scrollbar.policy = ScrollbarType.NO_RENDER
        config.scrollbar.end_margin = 2

        scroll = Scroll.from_config(
            config.scrollbar, ScrollbarOrientation.HORIZONTAL_TOP, config.style
        )

        assert scroll.policy is ScrollbarType.NO_RENDER
        assert scroll.end_margin == 2
        assert scroll.is_horizontal


class TestSetupLoguru:
    """Test file logging setup."""

    def test_log_file_written(self, tmp_path):
        """Messages from the package reach the log file once enabled."""
        log_file = tmp_path / "logs" / "gridscroll.log"
        try:
            setup_loguru(log_file, level="DEBUG")
            load_config(tmp_path / "missing.toml")
        finally:
            logger.remove()
            logger.disable("gridscroll")

        content = log_file.read_text()
        assert "Loguru initialized" in content
        assert "No configuration at" in content
