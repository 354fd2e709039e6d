#!/usr/bin/env python3
"""
Print an Argon2 hash for ADMIN_PASSWORD_HASH.

Usage:
  python scripts/hash_password.py [--password secret]
"""
from __future__ import annotations

import argparse
import getpass
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio.core.security import hash_password, verify_password  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Generate the admin password hash")
    ap.add_argument("--password", help="Password to hash (prompted when omitted)")
    args = ap.parse_args()

    password = args.password or getpass.getpass("Admin password: ")
    if not password:
        raise SystemExit("Password must not be empty")
    hashed = hash_password(password)
    if not verify_password(password, hashed):
        raise SystemExit("Hash verification failed")
    print(hashed)


if __name__ == "__main__":
    main()
