"""Creates (or promotes) an admin account: python scripts/create_admin.py EMAIL PASSWORD NAME"""
import argparse

from presensi.core.security import get_password_hash
from presensi.crud.user import create_user, get_user_by_email
from presensi.db.session import SessionLocal


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("full_name")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        user = get_user_by_email(db, args.email)
        if user:
            user.role = "admin"
            user.hashed_password = get_password_hash(args.password)
        else:
            user = create_user(db, args.email, args.password, args.full_name, role="admin")
        db.commit()
        print(f"OK: {args.email} is admin (id={user.id})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
