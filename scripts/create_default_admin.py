"""Bootstrap script: creates the default admin account if it does not exist."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.auth import hash_password
from app.core.config import settings
from app.core.database import Base, SessionLocal, engine
from app.core.permissions import UserRole
from app.models.user import User


def create_default_admin() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == settings.DEFAULT_ADMIN_EMAIL).first()
        if existing:
            print(f"Default admin already exists: {existing.email}")
            return

        admin = User(
            name=settings.DEFAULT_ADMIN_NAME,
            email=settings.DEFAULT_ADMIN_EMAIL,
            password_hash=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
            role=UserRole.ADMIN.value,
            permissions=[],
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        print(f"Default admin created: id={admin.id}, email={admin.email}")
    finally:
        db.close()


if __name__ == "__main__":
    create_default_admin()
