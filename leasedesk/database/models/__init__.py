from .auth_user_model import AuthUser
from .profile_model import Profile
from .building_model import Building, Unit
from .payment_model import Payment
from .invitation_model import Invitation
from .maintenance_request_model import MaintenanceRequest
from .document_model import Document

__all__ = ["AuthUser", "Profile", "Building", "Unit", "Payment", "Invitation", "MaintenanceRequest", "Document"]
