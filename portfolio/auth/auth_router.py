# portfolio/auth/auth_router.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from portfolio.auth.security import authorize, create_access_token, require_admin
from portfolio.config import ACCESS_TOKEN_EXPIRE_MINUTES, ENVIRONMENT, SESSION_COOKIE_NAME
from portfolio.database import get_db
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.auth_schema import LoginRequest, SessionUser, TokenResponse, UserRead

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=EnvelopeRoute)


# ================= ROUTES =================
@router.post("/login", summary="Sign in")
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = authorize(db, request.email, request.password)
    if user is None:
        raise HTTPException(401, "Invalid credentials")

    token = create_access_token(user.id, user.email)
    expires_in = ACCESS_TOKEN_EXPIRE_MINUTES * 60
    response = ok(
        TokenResponse(
            access_token=token,
            expires_in=expires_in,
            user=UserRead(id=user.id, email=user.email),
        )
    )
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=expires_in,
        httponly=True,
        samesite="lax",
        secure=ENVIRONMENT != "development",
    )
    return response


@router.get("/session", summary="Fetch session")
def get_session(session: SessionUser = Depends(require_admin)):
    return ok(session)


@router.post("/logout", summary="Sign out")
def logout():
    response = ok(message="Signed out")
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response
