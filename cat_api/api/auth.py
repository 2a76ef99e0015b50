# cat_api/api/auth.py

import logging
from datetime import timedelta
from pydantic import BaseModel
from passlib.context import CryptContext
from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cat_api.database import get_db
from cat_api.core.config import settings
from cat_api.core.errors import AuthError, ConflictError, ValidationError
from cat_api.core.session_store import SessionStore
from cat_api.models import User as UserModel


logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=settings.SESSION_TTL_HOURS)


router = APIRouter(tags=["auth"])
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SignupRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class CurrentUser(BaseModel):
    user_id: int
    username: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def authenticate_user(db: Session, username: str, password: str):
    user = db.query(UserModel).filter(UserModel.username == username).first()
    if not user or not verify_password(password, user.password):
        return None
    return user


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    return SessionStore(db, SESSION_TTL)


def _set_session_cookie(response: Response, sid: str):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sid,
        max_age=int(SESSION_TTL.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


def _read_session(request: Request, response: Response, store: SessionStore) -> CurrentUser | None:
    sid = request.cookies.get(settings.SESSION_COOKIE_NAME)
    payload = store.read(sid)
    if payload is None:
        return None
    # The store slid the expiry forward; keep the cookie in step.
    _set_session_cookie(response, sid)
    return CurrentUser(**payload)


def get_current_user(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
) -> CurrentUser:
    user = _read_session(request, response, store)
    if user is None:
        raise AuthError("Unauthorized. Please log in.")
    return user


# -------------------------------
# Auth Endpoints
# -------------------------------

@router.post("/signup")
def signup(req: SignupRequest, db: Session = Depends(get_db)):
    username = (req.username or "").strip()
    email = (req.email or "").strip()
    if not username or not email or not req.password:
        raise ValidationError("Username, email and password are required")

    user_exists = db.query(UserModel).filter(
        or_(UserModel.username == username, UserModel.email == email)
    ).first()
    if user_exists:
        raise ConflictError("Username or email already exists")

    db.add(UserModel(username=username, email=email, password=get_password_hash(req.password)))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Username or email already exists")

    logger.info("Registered user %s", username)
    return {"message": "User registered successfully"}


@router.post("/login")
def login(
    req: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    username = (req.username or "").strip()
    if not username or not req.password:
        raise ValidationError("Username and password are required")

    user = authenticate_user(db, username, req.password)
    if not user:
        logger.info("Failed login for %s", username)
        raise AuthError("Invalid username or password")

    store.clear_expired()
    sid = store.create({"user_id": user.id, "username": user.username})
    _set_session_cookie(response, sid)

    logger.info("User %s logged in", user.username)
    return {"message": "Login successful", "username": user.username}


@router.post("/logout")
def logout(request: Request, response: Response, store: SessionStore = Depends(get_session_store)):
    store.destroy(request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/check-auth")
def check_auth(request: Request, response: Response, store: SessionStore = Depends(get_session_store)):
    user = _read_session(request, response, store)
    if user is None:
        return {"authenticated": False}
    return {"authenticated": True, "username": user.username}
