#!/usr/bin/env python3
"""
Activate a pending account with its activation key.

Usage:
  python scripts/activate_account.py --key <activation-key>
"""
from __future__ import annotations

import argparse
import sys

from accounts.core.logging_config import configure_logging
from accounts.services.activation_service import ActivationService


def main() -> None:
    ap = argparse.ArgumentParser(description="Activate a pending account")
    ap.add_argument("--key", required=True, help="Activation key issued at registration")
    args = ap.parse_args()

    configure_logging()
    account = ActivationService().activate(args.key)
    if account is None:
        raise SystemExit("No pending account for this key (unknown or already used)")
    print(f"OK: account {account.login} activated")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
