"""
Print a password hash suitable for BLOG_PASSWORD_HASH.

Usage:
    python -m htmlblog.hash_password [PASSWORD]
"""

import argparse
import getpass

from werkzeug.security import generate_password_hash


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("password", nargs="?", help="Prompted for when omitted")
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Admin password: ")
    if not password:
        raise SystemExit("Password must not be empty")
    print(generate_password_hash(password))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
