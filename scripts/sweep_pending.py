#!/usr/bin/env python3
"""
Run one expiry sweep now, deleting accounts still pending after the retention window.

Usage:
  python scripts/sweep_pending.py [--retention-days 3]
"""
from __future__ import annotations

import argparse
import sys
from datetime import timedelta

from accounts.core.logging_config import configure_logging
from accounts.services.expiry_sweeper import ExpirySweeper


def main() -> None:
    ap = argparse.ArgumentParser(description="Delete not activated accounts")
    ap.add_argument("--retention-days", type=int, help="Override ACTIVATION_RETENTION_DAYS")
    args = ap.parse_args()

    configure_logging()
    sweeper = ExpirySweeper()
    if args.retention_days is not None:
        sweeper.retention = timedelta(days=args.retention_days)
    report = sweeper.sweep()
    print(f"OK: sweep up to {report.cutoff.isoformat()}")
    print(f"  Removed: {len(report.removed)}")
    print(f"  Activated meanwhile: {len(report.skipped)}")
    if report.failed:
        print(f"  Failed: {', '.join(report.failed)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
