import logging

from fastapi import APIRouter, Depends
from jose import JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.enums.unit_status import UnitStatus
from leasedesk.enums.user_role import UserRole
from leasedesk.schemas.auth_schema import (
    AcceptInviteRequest,
    LoginRequest,
    ProfileResponse,
    RefreshRequest,
    SignupRequest,
)
from leasedesk.services import auth_service
from leasedesk.services.invitation_service import InvitationService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import get_current_user
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    internal_server_error,
    not_found_error,
    unauthorized_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["Auth"])

invitation_service = InvitationService()
unit_service = UnitService()


@router.post("/signup")
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    """Direct registration for landlords and tenants"""
    if not payload.email or not payload.password or not payload.full_name or not payload.role:
        return bad_request_error("Email, password, full_name, and role are required")

    if payload.role not in (UserRole.LANDLORD.value, UserRole.TENANT.value):
        return bad_request_error("Role must be 'landlord' or 'tenant'")

    try:
        user = auth_service.create_auth_user(payload.email, payload.password, db)
        profile = auth_service.create_profile(user, payload.role, payload.full_name, db, phone=payload.phone)
        db.commit()
        db.refresh(profile)
    except auth_service.SignupError as e:
        db.rollback()
        return bad_request_error(f"Signup failed: {e}")
    except IntegrityError:
        db.rollback()
        return bad_request_error("Signup failed: User already registered")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create account")
        return internal_server_error("Failed to create profile")

    logger.info(f"New {profile.role} account {profile.id}", extra={"user_id": profile.id, "role": profile.role})
    return created_response(auth_service.issue_session(profile), message="Account created successfully")


@router.post("/login")
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    if not credentials.email or not credentials.password:
        return bad_request_error("Email and password are required")

    user = auth_service.authenticate(credentials.email, credentials.password, db)
    if not user:
        return unauthorized_error("Invalid credentials")

    profile = auth_service.get_profile(user.id, db)
    if not profile:
        return internal_server_error("Failed to fetch profile")

    return data_response(auth_service.issue_session(profile))


@router.post("/refresh")
def refresh(payload: RefreshRequest, db: Session = Depends(get_db)):
    """Exchange a refresh token for a new session"""
    if not payload.refresh_token:
        return bad_request_error("refresh_token is required")

    try:
        user_id = auth_service.user_id_from_refresh_token(payload.refresh_token)
    except JWTError:
        return unauthorized_error("Invalid or expired refresh token")

    profile = auth_service.get_profile(user_id, db)
    if not profile:
        return unauthorized_error("User profile not found")

    return data_response(auth_service.issue_session(profile))


@router.post("/accept-invite")
def accept_invite(payload: AcceptInviteRequest, db: Session = Depends(get_db)):
    """Create a tenant account from an invitation and link it to the unit"""
    if not payload.token or not payload.email or not payload.password or not payload.full_name:
        return bad_request_error("Token, email, password, and full_name are required")

    invitation = invitation_service.get_pending_by_token(db, payload.token)
    if not invitation:
        return not_found_error("Invalid or expired invitation")

    unit = invitation.unit
    if unit.status == UnitStatus.OCCUPIED.value:
        return bad_request_error("Unit is already occupied")

    try:
        user = auth_service.create_auth_user(payload.email, payload.password, db)
        profile = auth_service.create_profile(
            user, UserRole.TENANT.value, payload.full_name, db, phone=payload.phone
        )
        unit_service.assign_tenant(db, unit, profile.id)
        invitation_service.mark_accepted(db, invitation)
        db.commit()
        db.refresh(profile)
    except auth_service.SignupError as e:
        db.rollback()
        return bad_request_error(f"Signup failed: {e}")
    except IntegrityError:
        db.rollback()
        return bad_request_error("Signup failed: User already registered")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to accept invitation {invitation.id}")
        return internal_server_error("Failed to accept invitation")

    logger.info(
        f"Invitation {invitation.id} accepted for unit {unit.id}",
        extra={"user_id": profile.id, "role": profile.role},
    )
    return created_response(auth_service.issue_session(profile), message="Invitation accepted, account created")


@router.get("/me")
def get_me(current_user: Profile = Depends(get_current_user)):
    """Route for any authenticated user to get their own profile"""
    return data_response(ProfileResponse.model_validate(current_user))
