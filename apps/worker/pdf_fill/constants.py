"""
Layout constants for the justification page.

All coordinates are PDF points with the origin at the bottom-left corner,
so moving "down" the page means decreasing ``y``.
"""
from __future__ import annotations

import os

FONT_NAME = os.getenv("JUSTOFT_FONT_NAME", "Times-Roman").strip() or "Times-Roman"
FONT_PATH = os.getenv("JUSTOFT_FONT_PATH", "").strip() or None
FONT_SIZE = float(os.getenv("JUSTOFT_FONT_SIZE", "14"))
LEGACY_FONT_SIZE = 10.0

TEXT_X = 50.0
MAX_TEXT_WIDTH = 500.0
START_Y = 650.0
LINE_SPACING = 4.0  # pitch is font size + spacing
PARAGRAPH_GAP = 24.0
SIGNATURE_GAP = 50.0
CAPTION_GAP = 20.0

SIGNATURE_LINE = "_" * 27
CRM_PREFIX = "CRM: "
SERVICE_CAPTION = "Serviço de Oftalmologia - HGF"

PT_BR_MONTHS = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)
