from enum import Enum


class UnitStatus(str, Enum):
    OCCUPIED = "occupied"
    VACANT = "vacant"

    def __str__(self):
        return self.value
