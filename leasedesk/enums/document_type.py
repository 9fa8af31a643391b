from enum import Enum


class DocumentType(str, Enum):
    LEASE_AGREEMENT = "lease_agreement"
    RECEIPT = "receipt"
    OTHER = "other"
