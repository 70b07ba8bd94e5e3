"""
Configuration management for gridscroll
"""

import os
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional, TypeVar

from loguru import logger
from rich.errors import StyleSyntaxError
from rich.style import Style

from ..scroll.scrollbar import ScrollStyle
from ..scroll.types import HScrollPosition, ScrollbarPolicy, ScrollbarType, VScrollPosition
from .errors import ConfigError

E = TypeVar("E", bound=Enum)

CONFIG_ENV_VAR = "GRIDSCROLL_CONFIG"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ScrollbarConfig:
    """Configuration for a single scrollbar indicator (Scroll)."""

    policy: ScrollbarType = ScrollbarType.MINIMAL
    start_margin: int = 0
    end_margin: int = 0
    overscroll_by: Optional[int] = None
    scroll_by: Optional[int] = None  # None: a tenth of the page


@dataclass
class ScrolledConfig:
    """Configuration for the Scrolled wrapper."""

    h_policy: ScrollbarPolicy = ScrollbarPolicy.AS_NEEDED
    v_policy: ScrollbarPolicy = ScrollbarPolicy.AS_NEEDED
    h_position: HScrollPosition = HScrollPosition.BOTTOM
    v_position: VScrollPosition = VScrollPosition.RIGHT
    h_overscroll: int = 0
    v_overscroll: int = 0
    bordered: bool = False


@dataclass
class StyleConfig:
    """Scrollbar symbols and rich style strings (e.g. "bold cyan on black")."""

    thumb_symbol: Optional[str] = None
    thumb_style: Optional[str] = None
    track_symbol: Optional[str] = None
    track_style: Optional[str] = None
    begin_symbol: Optional[str] = None
    begin_style: Optional[str] = None
    end_symbol: Optional[str] = None
    end_style: Optional[str] = None
    no_symbol: Optional[str] = None
    no_style: Optional[str] = None

    def to_scroll_style(self) -> ScrollStyle:
        def parse(value: Optional[str]) -> Optional[Style]:
            return Style.parse(value) if value else None

        return ScrollStyle(
            thumb_symbol=self.thumb_symbol,
            thumb_style=parse(self.thumb_style),
            track_symbol=self.track_symbol,
            track_style=parse(self.track_style),
            begin_symbol=self.begin_symbol,
            begin_style=parse(self.begin_style),
            end_symbol=self.end_symbol,
            end_style=parse(self.end_style),
            no_symbol=self.no_symbol,
            no_style=parse(self.no_style),
        )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # default: ~/.local/share/gridscroll/gridscroll.log
    console_output: bool = False  # Also log to stderr (the terminal UI owns stdout)


@dataclass
class Config:
    """Main configuration object."""

    scrollbar: ScrollbarConfig = field(default_factory=ScrollbarConfig)
    scrolled: ScrolledConfig = field(default_factory=ScrolledConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "gridscroll"
    return Path.home() / ".config" / "gridscroll"


def get_data_dir() -> Path:
    """Get the data directory path (log files)."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "gridscroll"
    return Path.home() / ".local" / "share" / "gridscroll"


def get_config_path() -> Path:
    """Get the configuration file path.

    $GRIDSCROLL_CONFIG wins over XDG_CONFIG_HOME/gridscroll/config.toml
    (or ~/.config/gridscroll/config.toml).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# gridscroll configuration

[scrollbar]
# What a scrollbar shows when there is nothing to scroll:
# "show", "minimal" (dotted placeholder) or "no_render"
policy = "minimal"

# Cells left free before/after the scrollbar track
start_margin = 0
end_margin = 0

# Allow scrolling past the last full page by this many units
# overscroll_by = 0

# Units per wheel step (default: a tenth of the page)
# scroll_by = 3

[scrolled]
# "always", "as_needed" or "never"
h_policy = "as_needed"
v_policy = "as_needed"

# "top"/"bottom" and "left"/"right"
h_position = "bottom"
v_position = "right"

h_overscroll = 0
v_overscroll = 0

# Draw a border around the content; scrollbars are drawn over it
bordered = false

[style]
# Symbols and rich style strings for the scrollbar parts
# thumb_symbol = "█"
# thumb_style = "bold cyan"
# track_symbol = "║"
# track_style = "dim"
# begin_symbol = "▲"
# end_symbol = "▼"
# no_symbol = "┊"
# no_style = "dim"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/gridscroll/gridscroll.log)
# log_file = "/path/to/gridscroll.log"

# Also log to stderr
console_output = false
""".strip()


def _invalid(message: str, strict: bool) -> None:
    if strict:
        raise ConfigError(message)
    logger.warning(f"{message}; using the default")


def _parse_enum(enum_cls: type[E], value: Any, default: E, key: str, strict: bool) -> E:
    if value is None:
        return default
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        _invalid(f"Invalid value {value!r} for {key} (valid: {valid})", strict)
        return default


def _parse_style(value: Any, key: str, strict: bool) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        _invalid(f"Invalid style {value!r} for {key}: expected a string", strict)
        return None
    try:
        Style.parse(str(value))
    except StyleSyntaxError as e:
        _invalid(f"Invalid style {value!r} for {key}: {e}", strict)
        return None
    return str(value)


def _section(toml_data: dict, name: str, strict: bool) -> Optional[dict]:
    if name not in toml_data:
        return None
    data = toml_data[name]
    if not isinstance(data, dict):
        _invalid(f"Invalid section [{name}]: expected a table, got {data!r}", strict)
        return None
    return data


def _parse_typed(
    data: dict, key: str, default: Any, expected: type, section: str, strict: bool
) -> Any:
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass; keep the two apart
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        _invalid(
            f"Invalid value {value!r} for {section}.{key}: expected {expected.__name__}", strict
        )
        return default
    return value


def _parse_int(
    data: dict, key: str, default: Optional[int], section: str, strict: bool
) -> Optional[int]:
    """Non-negative integer setting."""
    value = _parse_typed(data, key, default, int, section, strict)
    if value is not None and value < 0:
        _invalid(f"Invalid value {value!r} for {section}.{key}: must not be negative", strict)
        return default
    return value


def load_config(path: Optional[Path] = None, strict: bool = False) -> Config:
    """Load configuration from a TOML file.

    A missing file yields the defaults. Invalid values are logged and replaced
    by their defaults, or raise ConfigError when ``strict`` is set.

    Args:
        path: Config file; default from get_config_path()
        strict: Raise instead of falling back to defaults

    Returns:
        Parsed configuration

    Raises:
        ConfigError: Unreadable TOML or invalid values (strict mode only)
    """
    config_path = Path(path) if path is not None else get_config_path()
    config = Config()

    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return config

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        if strict:
            raise ConfigError(f"Error loading configuration from {config_path}: {e}") from e
        logger.warning(f"Error loading configuration from {config_path}: {e}; using defaults")
        return config

    scrollbar_data = _section(toml_data, "scrollbar", strict)
    if scrollbar_data is not None:
        defaults = config.scrollbar
        config.scrollbar = ScrollbarConfig(
            policy=_parse_enum(
                ScrollbarType,
                scrollbar_data.get("policy"),
                defaults.policy,
                "scrollbar.policy",
                strict,
            ),
            start_margin=_parse_int(
                scrollbar_data, "start_margin", defaults.start_margin, "scrollbar", strict
            ),
            end_margin=_parse_int(
                scrollbar_data, "end_margin", defaults.end_margin, "scrollbar", strict
            ),
            overscroll_by=_parse_int(scrollbar_data, "overscroll_by", None, "scrollbar", strict),
            scroll_by=_parse_int(scrollbar_data, "scroll_by", None, "scrollbar", strict),
        )

    scrolled_data = _section(toml_data, "scrolled", strict)
    if scrolled_data is not None:
        defaults = config.scrolled

        def scrolled_enum(enum_cls: type[E], key: str) -> E:
            return _parse_enum(
                enum_cls, scrolled_data.get(key), getattr(defaults, key), f"scrolled.{key}", strict
            )

        config.scrolled = ScrolledConfig(
            h_policy=scrolled_enum(ScrollbarPolicy, "h_policy"),
            v_policy=scrolled_enum(ScrollbarPolicy, "v_policy"),
            h_position=scrolled_enum(HScrollPosition, "h_position"),
            v_position=scrolled_enum(VScrollPosition, "v_position"),
            h_overscroll=_parse_int(
                scrolled_data, "h_overscroll", defaults.h_overscroll, "scrolled", strict
            ),
            v_overscroll=_parse_int(
                scrolled_data, "v_overscroll", defaults.v_overscroll, "scrolled", strict
            ),
            bordered=_parse_typed(
                scrolled_data, "bordered", defaults.bordered, bool, "scrolled", strict
            ),
        )

    style_data = _section(toml_data, "style", strict)
    if style_data is not None:

        def symbol(key: str) -> Optional[str]:
            return _parse_typed(style_data, key, None, str, "style", strict)

        def style(key: str) -> Optional[str]:
            return _parse_style(style_data.get(key), f"style.{key}", strict)

        config.style = StyleConfig(
            thumb_symbol=symbol("thumb_symbol"),
            thumb_style=style("thumb_style"),
            track_symbol=symbol("track_symbol"),
            track_style=style("track_style"),
            begin_symbol=symbol("begin_symbol"),
            begin_style=style("begin_style"),
            end_symbol=symbol("end_symbol"),
            end_style=style("end_style"),
            no_symbol=symbol("no_symbol"),
            no_style=style("no_style"),
        )

    logging_data = _section(toml_data, "logging", strict)
    if logging_data is not None:
        defaults = config.logging
        level = _parse_typed(logging_data, "level", defaults.level, str, "logging", strict).upper()
        if level not in LOG_LEVELS:
            valid = ", ".join(LOG_LEVELS)
            _invalid(f"Invalid value {level!r} for logging.level (valid: {valid})", strict)
            level = defaults.level
        log_file = _parse_typed(logging_data, "log_file", None, str, "logging", strict)
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=level,
            log_file=log_file,
            console_output=_parse_typed(
                logging_data, "console_output", defaults.console_output, bool, "logging", strict
            ),
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return config
