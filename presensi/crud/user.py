# presensi/crud/user.py
from typing import Optional

from sqlalchemy.orm import Session

from presensi.core.security import get_password_hash, verify_password
from presensi.db.models.user import User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if user and verify_password(password, user.hashed_password):
        return user
    return None


def create_user(db: Session, email: str, password: str, full_name: str, role: str = "student") -> User:
    user = User(
        email=email.strip().lower(),
        hashed_password=get_password_hash(password),
        full_name=full_name.strip(),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_users(db: Session):
    return db.query(User).order_by(User.full_name).all()
