#!/usr/bin/env python3
"""
Admin Password Hash Script
Print a bcrypt hash for the ADMIN_PASSWORD_HASH setting

Usage:
    python -m script.hash_admin_password            # prompts for the password
    python -m script.hash_admin_password 's3cret'   # takes it from argv

Notes:
- When ADMIN_PASSWORD_HASH is set, login checks against it and ADMIN_PASSWORD is ignored
- bcrypt only uses the first 72 bytes of a password
"""

from getpass import getpass
import sys

from pydantic import SecretStr

from src.service.matchday.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


def hash_admin_password(plain_password: str) -> str:
    if not plain_password:
        raise ValueError('Password must not be empty')
    return BcryptPasswordHasher().hash_password(plain_password=SecretStr(plain_password))


def main() -> None:
    plain_password = sys.argv[1] if len(sys.argv) > 1 else getpass('Admin password: ')
    try:
        hashed = hash_admin_password(plain_password)
    except ValueError as e:
        print(f'❌ {e}', file=sys.stderr)
        sys.exit(1)

    print(f'ADMIN_PASSWORD_HASH={hashed}')


if __name__ == '__main__':
    main()
