"""
Register an editor account from the shell. Run from project root:
  python -m codepad.scripts.create_user USERNAME EMAIL PASSWORD
Example:
  python -m codepad.scripts.create_user alice alice@example.com your-secure-password
"""
import argparse
import logging
import sys

from codepad.core.config import get_settings
from codepad.core.database import SessionLocal, init_db
from codepad.core.errors import ValidationError
from codepad.services.auth import register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a Codepad user.")
    parser.add_argument("username", help="Display name")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help="Password")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    if not init_db():
        print("Database is not reachable.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(db, args.username.strip(), args.email.strip(), args.password, settings)
    except ValidationError as e:
        print(f"Could not register user: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
