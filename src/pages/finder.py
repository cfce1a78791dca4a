# src/pages/finder.py
"""
Combo Finder Page
-----------------
- Pick one owned Genre and one owned Type, see the rating
- Empty inventory shows a prompt to open the inventory dialog
"""

from typing import List, Optional, Tuple

import customtkinter as ctk

from core.combos import rate_one
from core.models import Rating
from inventory import Inventory
from ui.theme import (
    BG, BORDER, CARD_BG, HEADING_FONT, MUTED, OUTLINE_BR, OUTLINE_H,
    PRIMARY, PRIMARY_H, RESULT_FONT, SECONDARY, SUB_FONT, TEXT, rating_style,
)

GENRE_PLACEHOLDER = "Choose a Genre..."
TYPE_PLACEHOLDER = "Choose a Type..."


def _picked(value: str, placeholder: str) -> str:
    return "" if value == placeholder else value


def menu_values(owned: List[str], placeholder: str) -> List[str]:
    return [placeholder] + list(owned)


def pair_caption(genre: str, type_: str) -> str:
    return f"{genre} + {type_}"


class FinderPage(ctk.CTkFrame):
    def __init__(self, master, switch_page, inventory: Inventory, open_inventory=None):
        super().__init__(master, fg_color=BG)
        self.switch_page = switch_page
        self.inventory = inventory
        self.open_inventory = open_inventory

        # ===== Header =====
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=22, pady=(16, 6))
        ctk.CTkLabel(header, text="Combo Finder", font=HEADING_FONT, text_color=TEXT).grid(
            row=0, column=0, sticky="w"
        )
        ctk.CTkLabel(
            header,
            text="Check how a single Genre and Type pairing will be received.",
            font=SUB_FONT,
            text_color=MUTED,
        ).grid(row=1, column=0, sticky="w")

        # ===== Empty inventory prompt =====
        self.empty = ctk.CTkFrame(
            self, corner_radius=16, border_width=1, border_color=BORDER, fg_color=CARD_BG
        )
        ctk.CTkLabel(self.empty, text="Inventory Empty", font=HEADING_FONT, text_color=TEXT).pack(
            pady=(28, 6)
        )
        ctk.CTkLabel(
            self.empty,
            text=(
                "Please check off your unlocked Genres and Types in the\n"
                "Inventory menu to start finding combos."
            ),
            font=SUB_FONT,
            text_color=MUTED,
        ).pack(pady=(0, 14))
        ctk.CTkButton(
            self.empty,
            text="Open Inventory",
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            command=self._open_inventory,
        ).pack(pady=(0, 28))

        # ===== Pickers + result =====
        self.body = ctk.CTkFrame(self, fg_color="transparent")
        self.body.grid_columnconfigure((0, 1), weight=1)

        ctk.CTkLabel(self.body, text="SELECT GENRE", font=SUB_FONT, text_color=MUTED).grid(
            row=0, column=0, sticky="w", padx=(0, 8)
        )
        ctk.CTkLabel(self.body, text="SELECT TYPE", font=SUB_FONT, text_color=MUTED).grid(
            row=0, column=1, sticky="w", padx=(8, 0)
        )
        self.genre_menu = ctk.CTkOptionMenu(
            self.body,
            values=[GENRE_PLACEHOLDER],
            fg_color=PRIMARY,
            button_color=PRIMARY_H,
            command=lambda _v: self._update_result(),
        )
        self.genre_menu.grid(row=1, column=0, sticky="we", padx=(0, 8), pady=(4, 16))
        self.type_menu = ctk.CTkOptionMenu(
            self.body,
            values=[TYPE_PLACEHOLDER],
            fg_color=SECONDARY,
            command=lambda _v: self._update_result(),
        )
        self.type_menu.grid(row=1, column=1, sticky="we", padx=(8, 0), pady=(4, 16))

        self.result = ctk.CTkLabel(
            self.body,
            text="",
            height=120,
            corner_radius=16,
            font=RESULT_FONT,
            fg_color=CARD_BG,
            text_color=MUTED,
        )
        self.result.grid(row=2, column=0, columnspan=2, sticky="we")
        self.pair_lbl = ctk.CTkLabel(self.body, text="", font=SUB_FONT, text_color=MUTED)
        self.pair_lbl.grid(row=3, column=0, columnspan=2, pady=(6, 0))

        self.reset_btn = ctk.CTkButton(
            self.body,
            text="Reset Selection",
            state="disabled",
            width=130,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=self.reset_ui,
        )
        self.reset_btn.grid(row=4, column=1, sticky="e", pady=(12, 0))

        self.refresh()

    # ---------- Lifecycle hooks ----------
    def on_enter(self):
        self.refresh()

    def refresh(self):
        """Rebuild the pickers from the current inventory."""
        genres = self.inventory.owned_genres
        types = self.inventory.owned_types
        if not genres and not types:
            self.body.pack_forget()
            self.empty.pack(fill="x", padx=22, pady=16)
            return
        self.empty.pack_forget()
        self.body.pack(fill="both", expand=True, padx=22, pady=16)

        self.genre_menu.configure(values=menu_values(genres, GENRE_PLACEHOLDER))
        self.type_menu.configure(values=menu_values(types, TYPE_PLACEHOLDER))
        # drop picks that are no longer owned
        if self.genre_menu.get() not in genres:
            self.genre_menu.set(GENRE_PLACEHOLDER)
        if self.type_menu.get() not in types:
            self.type_menu.set(TYPE_PLACEHOLDER)
        self._update_result()

    def reset_ui(self):
        self.genre_menu.set(GENRE_PLACEHOLDER)
        self.type_menu.set(TYPE_PLACEHOLDER)
        self._update_result()

    # ---------- Internals ----------
    def current_pick(self) -> Tuple[str, str]:
        return (
            _picked(self.genre_menu.get(), GENRE_PLACEHOLDER),
            _picked(self.type_menu.get(), TYPE_PLACEHOLDER),
        )

    def current_rating(self) -> Optional[Rating]:
        return rate_one(*self.current_pick())

    def _update_result(self):
        genre, type_ = self.current_pick()
        self.reset_btn.configure(state="normal" if (genre or type_) else "disabled")
        rating = rate_one(genre, type_)
        if rating is None:
            self.result.configure(
                text="Select a Genre and Type to see the combination rating.",
                fg_color=CARD_BG,
                text_color=MUTED,
            )
            self.pair_lbl.configure(text="")
            return
        bg, fg, icon = rating_style(rating)
        self.result.configure(text=f"{icon}  {rating.value}", fg_color=bg, text_color=fg)
        self.pair_lbl.configure(text=pair_caption(genre, type_))

    def _open_inventory(self):
        if callable(self.open_inventory):
            self.open_inventory()
