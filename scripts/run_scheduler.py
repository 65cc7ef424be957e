#!/usr/bin/env python3
"""
Keep the daily expiry sweep running until SIGINT/SIGTERM.

Usage:
  python scripts/run_scheduler.py
"""
from __future__ import annotations

import signal
import threading

from accounts.core.logging_config import configure_logging
from accounts.services.scheduler_service import SweepScheduler


def main() -> None:
    configure_logging()
    scheduler = SweepScheduler()
    done = threading.Event()

    def _handle_signal(signum, frame):
        done.set()

    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    scheduler.start()
    try:
        done.wait()
    finally:
        scheduler.stop()


if __name__ == "__main__":
    main()
