"""
Create a user (e.g. the first admin) without going through the API. Run from project root:
  python -m app.scripts.create_user NAME USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Garden Admin" admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from pydantic import ValidationError

from app.core.database import SessionLocal
from app.core.errors import AppError
from app.schemas.auth import RegisterRequest
from app.services.users import register_user


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Seed Share user.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address (must be unique)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args()

    try:
        body = RegisterRequest(
            name=args.name.strip(),
            username=args.username.strip(),
            email=args.email,
            password=args.password,
            role=args.role,
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(db, body)
    except AppError as e:
        print(f"Could not create user: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' ({user.email}) with role '{user.role}', id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
