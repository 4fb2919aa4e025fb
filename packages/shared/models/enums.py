from enum import Enum


class JustificationType(str, Enum):
    URGENT = "Urgente"
    ELECTIVE = "Eletivo"
