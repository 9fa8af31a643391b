from enum import Enum


class MaintenanceStatus(str, Enum):
    """Enum for the different statuses of maintenance requests"""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"

    def __str__(self):
        return self.value
