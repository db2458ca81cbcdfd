import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.schemas.auth import LoginRequest, LoginResponse
from swiftjobs.services.auth_service import authenticate
from swiftjobs.services.exceptions import AuthenticationError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Check a job seeker's or employer's credentials.

    No session or token is issued; the caller gets the account id back.
    """
    try:
        account = authenticate(db, request.email, request.password, request.role)
    except AuthenticationError:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    return LoginResponse(user_id=account.id, role=request.role)
