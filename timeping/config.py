"""Service settings stored in a YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from timeping import ostools
from timeping.tlog import common

DEFAULT_CONFIG_PATH = "./timecnf.yaml"
DEFAULTS = {"taskpoolsize": 100, "timewheelsize": 60, "timeinterval": 100, "port": 9768}


class ConfigError(Exception):
    """Raised when settings cannot be created or read."""


@dataclass
class Config:
    """Runtime settings."""

    timeinterval: int = 0
    task_pool_size: int = 0
    time_wheel_size: int = 0
    port: int = 0
    timelevel: int = 0


def init_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> None:
    """Write the default settings to ``path``."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            yaml.safe_dump(DEFAULTS, handle)
    except OSError as exc:
        common("Setting creat default! Check your root setting文件创造失败", "config")
        raise ConfigError("setting creat default! Check your root") from exc
    common("init successful 初始化完成", "config")


def load_setting(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> Config:
    """Read settings from ``path``.

    A missing file gets the defaults written to it, then ConfigError is raised.
    """
    if not ostools.file_exists(path):
        init_config(path)
        raise ConfigError("初始化完成")
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        values = {str(key).lower(): value for key, value in data.items()}
        number = {key: int(values.get(key) or 0) for key in
                  ("timeinterval", "taskpoolsize", "timewheelsize", "port", "timelevel")}
    except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError) as exc:
        raise ConfigError(f"cannot read settings from {path}: {exc}") from exc
    config = Config(
        timeinterval=number["timeinterval"] & 0xFFFF,
        task_pool_size=number["taskpoolsize"] & 0xFFFF,
        time_wheel_size=number["timewheelsize"] & 0xFFFF,
        port=number["port"] & 0xFFFF,
        timelevel=number["timelevel"],
    )
    common("Setting is OK 配置读取成功", "Setting")
    return config