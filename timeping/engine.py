"""Service start-up and the wait for a stop signal."""

from __future__ import annotations

import signal
import threading
from typing import Sequence

from timeping import config, tlog
from timeping.task import TaskPool
from timeping.tlog import common


class Engine:
    """Opens the log, loads settings, builds the task pool and waits to be stopped."""

    def __init__(
        self,
        config_path: str = config.DEFAULT_CONFIG_PATH,
        log_path: str = tlog.DEFAULT_LOG_PATH,
    ) -> None:
        self.config_path = config_path
        self.log_path = log_path
        self.config: config.Config | None = None
        self.pool: TaskPool | None = None
        self._stop = threading.Event()

    def initialize(self) -> None:
        """Open the log, read settings, build the pool and catch SIGINT/SIGTERM."""
        tlog.init_log(self.log_path)
        self.config = config.load_setting(self.config_path)
        self.pool = TaskPool(self.config.task_pool_size)
        if threading.current_thread() is threading.main_thread():
            for signum in (signal.SIGINT, signal.SIGTERM):
                signal.signal(signum, lambda *_: self._stop.set())

    def run(self) -> None:
        """Block until stopped by a signal or by ``stop``."""
        common("start successfully 启动成功", "engine")
        self._stop.wait()
        tlog.exit_log()
        common("Exit 已停止")

    def stop(self) -> None:
        """Make ``run`` return."""
        self._stop.set()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the service in the current directory."""
    engine = Engine()
    try:
        engine.initialize()
    except (config.ConfigError, OSError):
        tlog.exit_log()
        return 1
    engine.run()
    return 0