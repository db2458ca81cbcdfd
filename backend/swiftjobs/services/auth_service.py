import logging
from typing import Union
from sqlalchemy.orm import Session

from swiftjobs.core.security import verify_password
from swiftjobs.db.models.employer import Employer
from swiftjobs.db.models.job_seeker import JobSeeker
from swiftjobs.services.exceptions import AuthenticationError
from swiftjobs.services.job_seeker_service import normalize_email

logger = logging.getLogger(__name__)

ACCOUNT_MODELS = {
    "job_seeker": JobSeeker,
    "employer": Employer,
}


def authenticate(db: Session, email: str, password: str, role: str) -> Union[JobSeeker, Employer]:
    """
    Look up an account by email and role and check its password.

    Raises:
        AuthenticationError: On unknown email, missing password, or mismatch
    """
    model = ACCOUNT_MODELS.get(role)
    if model is None:
        raise AuthenticationError(f"Unknown role: {role}")

    account = db.query(model).filter(model.email == normalize_email(email)).first()

    if not account or not verify_password(password, account.password_hash):
        logger.info("login_failed", extra={"role": role})
        raise AuthenticationError("Invalid email or password")

    logger.info("login_succeeded", extra={"role": role, "account_id": str(account.id)})
    return account
