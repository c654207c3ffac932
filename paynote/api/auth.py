"""
Authentication endpoints and the session dependency.

Login stores the user's id in the signed session cookie.
Every protected endpoint depends on get_current_user, which
turns that cookie back into a User or fails with 401.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from paynote.errors import AuthenticationError, ValidationError
from paynote.models.base import get_db
from paynote.models.user import User
from paynote.schemas.auth import LoginRequest, RegisterRequest, UserResponse
from paynote.schemas.transaction import MessageResponse
from paynote.services.auth_service import AuthService, normalize_email

router = APIRouter(prefix="/auth", tags=["Auth"])

SESSION_USER_KEY = "user_id"


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    """Resolve the session cookie to a user, or raise AuthenticationError."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise AuthenticationError("Unauthorized")

    try:
        return AuthService(db).get_user(user_id)
    except AuthenticationError:
        # The account behind this session no longer exists
        request.session.clear()
        raise


@router.post("/register", response_model=UserResponse, status_code=201)
def register(
    body: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Create a new account. Does not log in."""
    service = AuthService(db)
    try:
        user = service.register(body)
        db.commit()
        return user
    except ValidationError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"User with email '{normalize_email(body.email)}' already exists",
        )


@router.post("/login", response_model=UserResponse)
def login(
    body: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Check credentials and start a session."""
    service = AuthService(db)
    try:
        user = service.authenticate(body.email, body.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))

    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id
    return user


@router.post("/logout", response_model=MessageResponse)
def logout(request: Request):
    """End the session. Safe to call without one."""
    request.session.clear()
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    """Get the logged-in user."""
    return user
