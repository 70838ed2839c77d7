#!/usr/bin/env python3
"""XDG path helpers for tbounds."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "tbounds"


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()


def config_dir() -> Path:
    return xdg_config_home() / APP_NAME


__all__ = ["APP_NAME", "xdg_config_home", "config_dir"]
