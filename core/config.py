"""
Configuration for the neko CLI.

Settings live in a small JSON file. The version string is injected here
once, so commands receive it instead of reading build metadata ad hoc.
"""
import json
import os
from typing import Literal

from pydantic import BaseModel, ValidationError

from core import __version__

CONFIG_FILE = "neko.json"
CONFIG_PATHS = [CONFIG_FILE, os.path.join("~", ".nekonomicon", CONFIG_FILE)]


class NekoConfig(BaseModel):
    """Settings shared by the CLI commands."""
    version: str = __version__
    story_style: Literal["brief", "normal", "full"] = "normal"
    color: bool = True


def load_config(paths=None):
    """Load settings from the first config file found, falling back to defaults."""
    for p in paths or CONFIG_PATHS:
        path = os.path.expanduser(p)
        if not os.path.exists(path):
            continue
        try:
            with open(path, "r") as f:
                return NekoConfig(**json.load(f))
        except (OSError, ValueError, TypeError, ValidationError):
            return NekoConfig()
    return NekoConfig()


def write_default_config(path=CONFIG_FILE):
    """Write the default settings (without the version) to path."""
    settings = NekoConfig().model_dump(exclude={"version"})
    with open(path, "w") as f:
        json.dump(settings, f, indent=2)
    return settings
