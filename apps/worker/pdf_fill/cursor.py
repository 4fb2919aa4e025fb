"""
Vertical cursor and the spacing rules of the signature block.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Cursor:
    y: float

    def down(self, dy: float) -> "Cursor":
        return Cursor(self.y - dy)


class SignatureBlockState(str, Enum):
    """Last element drawn under the signature rule."""

    AFTER_SIGNATURE = "after_signature"
    AFTER_DOCTOR_NAME = "after_doctor_name"
    AFTER_CRM = "after_crm"

    @property
    def gap(self) -> float:
        """Distance from this element down to the next one."""
        return _GAPS[self]


_GAPS = {
    SignatureBlockState.AFTER_SIGNATURE: 20.0,
    SignatureBlockState.AFTER_DOCTOR_NAME: 20.0,
    SignatureBlockState.AFTER_CRM: 40.0,
}
