# src/ui/card.py
import customtkinter as ctk

from core.models import Rating
from ui.theme import BADGE_FONT, BORDER, CARD_BG, MUTED, TEXT, rating_style


class ComboCard(ctk.CTkFrame):
    """One (genre, type) row: icon badge, the two names, optional rating tag."""

    def __init__(self, master, genre: str, type_: str, rating: Rating, show_label=True):
        super().__init__(
            master, corner_radius=12, border_width=1, border_color=BORDER, fg_color=CARD_BG
        )
        self.genre = genre
        self.type = type_
        self.rating = rating
        bg, fg, icon = rating_style(rating)

        self.grid_columnconfigure(1, weight=1)

        self.icon_lbl = ctk.CTkLabel(
            self, text=icon, width=40, height=40, corner_radius=20,
            fg_color=bg, text_color=fg, font=BADGE_FONT,
        )
        self.icon_lbl.grid(row=0, column=0, rowspan=2, padx=(12, 10), pady=10)

        self.genre_lbl = ctk.CTkLabel(
            self, text=genre, font=("Segoe UI", 14, "bold"), text_color=TEXT
        )
        self.genre_lbl.grid(row=0, column=1, sticky="sw", pady=(10, 0))
        self.type_lbl = ctk.CTkLabel(self, text=type_, font=("Segoe UI", 12), text_color=MUTED)
        self.type_lbl.grid(row=1, column=1, sticky="nw", pady=(0, 10))

        self.tag_lbl = None
        if show_label:
            self.tag_lbl = ctk.CTkLabel(
                self, text=rating.value, corner_radius=6,
                fg_color=bg, text_color=fg, font=BADGE_FONT,
            )
            self.tag_lbl.grid(row=0, column=2, rowspan=2, padx=12)
