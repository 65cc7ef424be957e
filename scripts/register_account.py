#!/usr/bin/env python3
"""
Register a pending account directly against the configured database.

Usage:
  python scripts/register_account.py --login alice --password s3cret [--role ROLE_USER] [--email a@b.c]
"""
from __future__ import annotations

import argparse
import sys

from accounts.core.logging_config import configure_logging
from accounts.services.registration_service import RegistrationService


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a pending account")
    ap.add_argument("--login", required=True, help="Login of the new account")
    ap.add_argument("--password", required=True, help="Plain password (hashed before storage)")
    ap.add_argument("--user-no", help="External user number")
    ap.add_argument("--role", action="append", dest="roles", help="Role id; only the first one is granted")
    ap.add_argument("--first-name")
    ap.add_argument("--last-name")
    ap.add_argument("--email")
    ap.add_argument("--lang-key", default="en")
    args = ap.parse_args()

    configure_logging()
    account = RegistrationService().register(
        args.login,
        args.user_no,
        args.password,
        role_ids=args.roles or ["ROLE_USER"],
        first_name=args.first_name,
        last_name=args.last_name,
        email=args.email,
        lang_key=args.lang_key,
    )
    print("OK: account registered")
    print(f"  ID: {account.id}")
    print(f"  Login: {account.login}")
    print(f"  Authorities: {', '.join(sorted(account.authority_names))}")
    print(f"  Activation key: {account.activation_key}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
