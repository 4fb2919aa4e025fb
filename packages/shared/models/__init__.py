from .domain import Record, SignerInfo, StoredRecord
from .enums import JustificationType

__all__ = ["JustificationType", "Record", "SignerInfo", "StoredRecord"]
