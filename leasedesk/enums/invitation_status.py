from enum import Enum


class InvitationStatus(str, Enum):
    """Lifecycle of a tenant invitation"""

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"

    def __str__(self):
        return self.value
