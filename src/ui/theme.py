# src/ui/theme.py
"""
Combo Finder Theme
------------------
- Light/dark pairs so the window follows the appearance mode
- Indigo accent for genres, emerald for types
- One badge style per rating tier
"""

from typing import Dict, Tuple

from core.models import Rating

# === Core Surfaces ===
BG         = ("#F8F9FA", "#0A0A0A")   # Main window background
CARD_BG    = ("#FFFFFF", "#18181B")   # Cards and list rows
BORDER     = ("#E4E4E7", "#27272A")   # Card borders

# === Typography Colors ===
TEXT       = ("#18181B", "#F4F4F5")
MUTED      = ("#71717A", "#A1A1AA")

# === Accents ===
PRIMARY    = "#4F46E5"   # Indigo (genres, main actions)
PRIMARY_H  = "#4338CA"
SECONDARY  = "#059669"   # Emerald (types)
SECONDARY_H = "#047857"

# === Outlines / Neutral Buttons ===
OUTLINE_BR = ("#D4D4D8", "#3F3F46")
OUTLINE_H  = ("#F4F4F5", "#27272A")

# === Fonts ===
TITLE_FONT   = ("Segoe UI", 30, "bold")
SUB_FONT     = ("Segoe UI", 13)
HEADING_FONT = ("Segoe UI", 20, "bold")
BODY_FONT    = ("Segoe UI", 13)
BADGE_FONT   = ("Segoe UI", 12, "bold")
RESULT_FONT  = ("Segoe UI", 28, "bold")

# === Rating badges: (background, foreground, icon) ===
RATING_STYLES: Dict[Rating, Tuple[Tuple[str, str], Tuple[str, str], str]] = {
    Rating.AMAZING:  (("#D1FAE5", "#064E3B"), ("#047857", "#6EE7B7"), "✨"),
    Rating.CREATIVE: (("#FEF3C7", "#78350F"), ("#B45309", "#FCD34D"), "💡"),
    Rating.NOT_BAD:  (("#DBEAFE", "#1E3A8A"), ("#1D4ED8", "#93C5FD"), "👍"),
    Rating.HMM:      (("#F4F4F5", "#27272A"), ("#52525B", "#D4D4D8"), "🤔"),
    Rating.NOT_GOOD: (("#FFE4E6", "#4C0519"), ("#BE123C", "#FDA4AF"), "⚠"),
}


def rating_style(rating: Rating):
    return RATING_STYLES.get(rating, RATING_STYLES[Rating.NOT_BAD])
