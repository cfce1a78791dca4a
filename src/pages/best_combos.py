# src/pages/best_combos.py
import customtkinter as ctk

from core.combos import best_combos
from core.models import Rating
from inventory import Inventory
from pages.all_combos import can_scan
from ui.card import ComboCard
from ui.grid import columns_for_width, grid_evenly
from ui.theme import BG, HEADING_FONT, MUTED, PRIMARY, PRIMARY_H, SUB_FONT, TEXT

EMPTY_TEXT = (
    'No "Amazing!" combinations found with your current inventory.\n'
    "Try unlocking more Genres or Types!"
)
SCAN_HINT = 'Scans your inventory for "Amazing!" combinations'


class BestCombosPage(ctk.CTkFrame):
    """Owned pairings that reach the Amazing tier, grouped by genre.

    Nothing is computed until the scan button is pressed.
    """

    def __init__(self, master, switch_page, inventory: Inventory):
        super().__init__(master, fg_color=BG)
        self.switch_page = switch_page
        self.inventory = inventory
        self.show_results = False
        self._cards = []
        self._cols = 2

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=22, pady=(16, 6))
        header.grid_columnconfigure(0, weight=1)
        self.title = ctk.CTkLabel(
            header, text="Best Combinations", font=HEADING_FONT, text_color=TEXT
        )
        self.title.grid(row=0, column=0, sticky="w")
        self.hide_btn = ctk.CTkButton(
            header,
            text="Hide Results",
            width=100,
            fg_color="transparent",
            text_color=MUTED,
            command=self.hide,
        )

        self.scan_panel = ctk.CTkFrame(self, fg_color="transparent")
        self.scan_btn = ctk.CTkButton(
            self.scan_panel,
            text="✨ Find My Best Combos",
            height=44,
            corner_radius=14,
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            command=self.show,
        )
        self.scan_btn.pack(pady=(24, 6))
        ctk.CTkLabel(self.scan_panel, text=SCAN_HINT, font=SUB_FONT, text_color=MUTED).pack()

        self.listing = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.empty_lbl = ctk.CTkLabel(
            self.listing, text=EMPTY_TEXT, font=SUB_FONT, text_color=MUTED
        )

    def on_enter(self):
        self.refresh()

    def show(self):
        self.show_results = True
        self.refresh()

    def hide(self):
        self.show_results = False
        self._clear_cards()
        self.refresh()

    def on_resize(self, w, h):
        cols = columns_for_width(w)
        if cols != self._cols:
            self._cols = cols
            grid_evenly(self.listing, self._cards, num_cols=cols)

    def _clear_cards(self):
        for card in self._cards:
            card.destroy()
        self._cards = []

    def refresh(self):
        genres = self.inventory.owned_genres
        types = self.inventory.owned_types
        if not self.show_results:
            self.listing.pack_forget()
            self.hide_btn.grid_forget()
            self.title.configure(text="Best Combinations")
            self.scan_btn.configure(state="normal" if can_scan(genres, types) else "disabled")
            self.scan_panel.pack(fill="x", padx=22)
            return

        self.scan_panel.pack_forget()
        self.hide_btn.grid(row=0, column=1, sticky="e")
        self.listing.pack(fill="both", expand=True, padx=16, pady=(6, 12))
        self._clear_cards()
        self.empty_lbl.grid_forget()

        combos = best_combos(genres, types)
        self.title.configure(text=f"Best Combinations ({len(combos)})")
        if not combos:
            self.empty_lbl.grid(row=0, column=0, columnspan=self._cols, pady=24)
            return
        self._cards = [
            ComboCard(self.listing, g, t, Rating.AMAZING, show_label=False) for g, t in combos
        ]
        grid_evenly(self.listing, self._cards, num_cols=self._cols)
