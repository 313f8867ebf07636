# portfolio/config.py

import os

from dotenv import load_dotenv

# ---------------- ENV ----------------
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))

ENVIRONMENT = os.getenv("ENVIRONMENT", "production").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# If DATABASE_URL is NOT provided -> use local SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./portfolio.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# ---------------- AUTH ----------------
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60)))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
SESSION_COOKIE_NAME = "session_token"

if not SECRET_KEY:
    if ENVIRONMENT != "development":
        raise RuntimeError("SECRET_KEY missing in environment!")
    # insecure, development only
    SECRET_KEY = "dev-insecure-secret"

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@portfolio.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# ---------------- CLOUDINARY ----------------
CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")

# ---------------- SITE ----------------
SITE_URL = os.getenv("SITE_URL", "http://localhost:3000").rstrip("/")
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN")

PROFILE_DEFAULTS = {
    "name": os.getenv("PROFILE_DEFAULT_NAME", "Portfolio Owner"),
    "title": os.getenv("PROFILE_DEFAULT_TITLE", "Full Stack Developer"),
    "bio": os.getenv(
        "PROFILE_DEFAULT_BIO",
        "Full-stack developer building scalable web applications with modern "
        "frontend frameworks, Python services and cloud infrastructure.",
    ),
    "email": os.getenv("PROFILE_DEFAULT_EMAIL", "contact@example.com"),
    "phone": None,
    "location": None,
    "website": None,
    "github": None,
    "linkedin": None,
    "twitter": None,
    "profile_image": "/profile-image.jpg",
}
