from enum import Enum


class UserRole(str, Enum):
    LANDLORD = "landlord"
    TENANT = "tenant"

    def __str__(self):
        return self.value
