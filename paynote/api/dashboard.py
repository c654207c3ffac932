"""
Read-only views: the dashboard and the per-person page.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from paynote.api.auth import get_current_user
from paynote.models.base import get_db
from paynote.models.user import User
from paynote.schemas.summary import DashboardResponse, PersonDetailResponse
from paynote.services.dashboard_service import DashboardService

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    q: str | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Most recent notes with overall totals and the
    "owes you" / "you owe" lists.

    q filters by person name or purpose (case-insensitive);
    the totals follow the filter.
    """
    return DashboardService(db).dashboard(user.id, q)


@router.get("/people/{person_name:path}", response_model=PersonDetailResponse)
def person_detail(
    person_name: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    All notes with one person and their net balance.

    The name is matched exactly (case-sensitive) after URL
    decoding. A blank name never matches a note, so it is 404.
    """
    if not person_name.strip():
        raise HTTPException(status_code=404, detail="Person not found")
    return DashboardService(db).person(user.id, person_name)
