"""ADR configuration file: locate, read and write .adr.json."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".adr.json"
DEFAULT_ADR_DIR = "docs/adr"
DEFAULT_EDITORS = ("nvim", "vim", "pico", "nano")


@dataclass
class AdrConfig:
    """Settings read from .adr.json.

    ``dir`` may be relative; it is then resolved against ``config_dir``,
    the directory holding the config file.
    """
    dir: str = DEFAULT_ADR_DIR
    editors: list[str] = field(default_factory=lambda: list(DEFAULT_EDITORS))
    config_dir: str = ""

    @property
    def abs_dir(self) -> str:
        if os.path.isabs(self.dir):
            return self.dir
        return os.path.join(self.config_dir or os.getcwd(), self.dir)

    @property
    def config_file(self) -> str:
        return os.path.join(self.config_dir, CONFIG_FILE_NAME)

    def to_json(self) -> str:
        data = {"dir": self.dir}
        if list(self.editors) != list(DEFAULT_EDITORS):
            data["editors"] = list(self.editors)
        return json.dumps(data, indent=2) + "\n"


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Walk up from start until a config file is found or the root is reached."""
    directory = Path(start or Path.cwd()).resolve()
    while True:
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
        if directory.parent == directory:
            return None
        directory = directory.parent


def read_config(cwd: Optional[Path] = None) -> AdrConfig:
    """Locate and load the config file.

    Raises:
        FileNotFoundError: If no config file exists in cwd or above it
        ValueError: If the config file is not valid
    """
    path = find_config_file(cwd)
    if path is None:
        raise FileNotFoundError(
            f"Config file {CONFIG_FILE_NAME} not found. Run 'adr init' first."
        )
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e
    return _config_from_dict(data, path)


def _config_from_dict(data, path: Path) -> AdrConfig:
    if not isinstance(data, dict) or not isinstance(data.get("dir"), str) or not data["dir"]:
        raise ValueError(f"Invalid config file {path}: 'dir' must be a non-empty string")
    editors = data.get("editors", list(DEFAULT_EDITORS))
    if not isinstance(editors, list) or not all(isinstance(e, str) for e in editors):
        raise ValueError(f"Invalid config file {path}: 'editors' must be a list of strings")
    return AdrConfig(dir=data["dir"], editors=editors, config_dir=str(path.parent))


def init_config_file(config: AdrConfig, cwd: Optional[Path] = None) -> Path:
    """Create the config file in cwd. Refuses to overwrite an existing one."""
    directory = Path(cwd or Path.cwd())
    path = directory / CONFIG_FILE_NAME
    if path.exists():
        raise FileExistsError(f"Error writing config file: {path} already exists")
    config.config_dir = str(directory.resolve())
    path.write_text(config.to_json(), encoding="utf-8")
    return path
