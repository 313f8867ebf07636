# portfolio/auth/security.py

from datetime import datetime, timedelta, timezone
import logging
from typing import Optional
from urllib.parse import quote

from fastapi import HTTPException, Request
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from portfolio.config import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    ALGORITHM,
    BCRYPT_ROUNDS,
    SECRET_KEY,
    SESSION_COOKIE_NAME,
)
from portfolio.models.user import User
from portfolio.responses import fail
from portfolio.schemas.auth_schema import SessionUser

logger = logging.getLogger("portfolio.auth")

# ================= SECURITY =================
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

LOGIN_PAGE = "/admin/login"
UNAUTHORIZED = "Unauthorized"

# reads are public, writes need a session
ADMIN_WRITE_PREFIXES = ("/api/projects", "/api/skills", "/api/experience", "/api/profile", "/api/settings")
# every method needs a session
ADMIN_ONLY_PREFIXES = ("/api/admin", "/api/contacts", "/api/upload", "/api/images", "/api/analytics")
WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


# ================= HELPERS =================
def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def authorize(db: Session, email: str, password: str) -> Optional[User]:
    """Return the user for valid credentials, None otherwise."""
    user = db.query(User).filter(User.email == email.lower()).first()
    if user is None:
        # keep timing identical to a wrong password
        pwd_context.dummy_verify()
        logger.info("login_unknown_user")
        return None

    if not verify_password(password, user.password):
        logger.info("login_bad_password", extra={"user_id": user.id})
        return None

    logger.info("login_succeeded", extra={"user_id": user.id})
    return user


def create_access_token(user_id: str, email: str, minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    exp = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode({"sub": user_id, "email": email, "exp": exp}, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[SessionUser]:
    try:
        data = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    if not data.get("sub") or not data.get("email"):
        return None
    return SessionUser(user_id=data["sub"], email=data["email"])


def token_from_request(request: Request) -> Optional[str]:
    header = request.headers.get("authorization")
    if header and header.lower().startswith("bearer "):
        return header.split(" ", 1)[1].strip()
    return request.cookies.get(SESSION_COOKIE_NAME)


def read_session(request: Request) -> Optional[SessionUser]:
    token = token_from_request(request)
    if not token:
        return None
    return decode_access_token(token)


# ================= ROUTE GUARD =================
def require_admin(request: Request) -> SessionUser:
    session = read_session(request)
    if session is None:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED, headers={"WWW-Authenticate": "Bearer"})
    return session


def _under(path: str, prefixes) -> bool:
    return any(path == prefix or path.startswith(prefix + "/") for prefix in prefixes)


def is_guarded_path(path: str) -> bool:
    if path == LOGIN_PAGE:
        return False
    return _under(path, ("/admin", "/api/admin"))


def requires_session(method: str, path: str) -> bool:
    """True for API calls that must carry a session before the body is read."""
    if method == "OPTIONS":
        return False
    if _under(path, ADMIN_ONLY_PREFIXES):
        return True
    return method in WRITE_METHODS and _under(path, ADMIN_WRITE_PREFIXES)


class AdminGuardMiddleware(BaseHTTPMiddleware):
    """Rejects admin traffic without a session before routing.

    Pages under /admin redirect to the login page; admin API calls get a 401
    without their body being parsed.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        guarded = is_guarded_path(path) or requires_session(request.method, path)
        if guarded and read_session(request) is None:
            if path.startswith("/api/"):
                return fail(401, UNAUTHORIZED, headers={"WWW-Authenticate": "Bearer"})
            return RedirectResponse(f"{LOGIN_PAGE}?callbackUrl={quote(path)}", status_code=307)
        return await call_next(request)
