"""Configuration management for worklog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WORKLOG_HOME = Path(os.environ.get("WORKLOG_HOME", Path.home() / ".worklog"))
CONFIG_FILE = WORKLOG_HOME / "worklog.conf"
DATA_DIR = WORKLOG_HOME / "logs"


@dataclass
class Config:
    """worklog configuration."""

    data_dir: str = ""
    priority_marker: str = "!"
    editor: str = ""
    file_extension: str = "yml"

    @property
    def data_path(self) -> Path:
        """Directory holding the day files."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]

    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from worklog.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "priority_marker":
                config.priority_marker = value
            case "editor":
                config.editor = value
            case "file_extension":
                config.file_extension = value.lstrip(".") or config.file_extension
            case _:
                logger.warning(f"Unknown config key in {config_file}: {key}")

    return config
