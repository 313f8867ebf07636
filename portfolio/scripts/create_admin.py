# portfolio/scripts/create_admin.py
"""Provision the admin user once: python -m portfolio.scripts.create_admin"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from portfolio.auth.security import hash_password
from portfolio.config import ADMIN_EMAIL, ADMIN_PASSWORD
from portfolio.database import SessionLocal
from portfolio.models.registry import create_all
from portfolio.models.user import User
from portfolio.store import commit

logger = logging.getLogger("portfolio.admin")


def create_admin(db: Session, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> Optional[User]:
    """Create the admin user. Returns None when it already exists."""
    email = email.lower()
    if db.query(User).filter(User.email == email).first():
        return None

    user = User(email=email, password=hash_password(password))
    db.add(user)
    commit(db, "Admin user already exists")
    db.refresh(user)
    logger.info("admin_created", extra={"user_id": user.id})
    return user


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    create_all()
    db = SessionLocal()
    try:
        user = create_admin(db)
    finally:
        db.close()

    if user is None:
        print("Admin user already exists")
        return

    print(f"Admin user created successfully: id={user.id} email={user.email}")
    print("\nLogin credentials:")
    print(f"Email: {ADMIN_EMAIL.lower()}")
    print(f"Password: {ADMIN_PASSWORD}")
    print("\nPlease change the password after first login!")


if __name__ == "__main__":
    main()
