# src/pages/all_combos.py
"""
All Combinations Page
---------------------
Every owned Genre x Type pairing, best rating first, with a rating filter.
Cards are only built after the user asks for the scan; until then the page
shows how many pairings a scan would cover.
"""

from typing import Dict, List, Sequence

import customtkinter as ctk

from core.combos import count_by_rating, enumerate_all, filter_by_rating
from core.models import ALL, RATING_ORDER, ComboResult, Rating
from inventory import Inventory
from ui.card import ComboCard
from ui.grid import columns_for_width, grid_evenly
from ui.theme import BG, HEADING_FONT, MUTED, PRIMARY, PRIMARY_H, SUB_FONT, TEXT


def filter_labels(counts: Dict[Rating, int]) -> List[str]:
    """Segment labels for the filter bar, e.g. ``"Creative (4)"``."""
    total = sum(counts.values())
    labels = [f"{ALL} ({total})"]
    labels.extend(f"{r.value} ({counts.get(r, 0)})" for r in RATING_ORDER)
    return labels


def label_to_filter(label: str) -> str:
    """Inverse of :func:`filter_labels` for a single segment."""
    name = label.rsplit(" (", 1)[0]
    if name == ALL:
        return ALL
    return Rating.parse(name).value


def can_scan(genres: Sequence[str], types: Sequence[str]) -> bool:
    return bool(genres) and bool(types)


def scan_hint(genres: Sequence[str], types: Sequence[str]) -> str:
    return f"Scans your inventory for all {len(genres) * len(types)} possible combinations"


class AllCombosPage(ctk.CTkFrame):
    def __init__(self, master, switch_page, inventory: Inventory):
        super().__init__(master, fg_color=BG)
        self.switch_page = switch_page
        self.inventory = inventory
        self.filter = ALL
        self.show_results = False
        self._results: List[ComboResult] = []
        self._cards: List[ComboCard] = []
        self._cols = 2

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=22, pady=(16, 6))
        header.grid_columnconfigure(0, weight=1)
        self.title = ctk.CTkLabel(
            header, text="All Combinations", font=HEADING_FONT, text_color=TEXT
        )
        self.title.grid(row=0, column=0, sticky="w")
        ctk.CTkLabel(
            header,
            text="Every pairing you can make right now, best first.",
            font=SUB_FONT,
            text_color=MUTED,
        ).grid(row=1, column=0, sticky="w")
        self.hide_btn = ctk.CTkButton(
            header,
            text="Hide",
            width=70,
            fg_color="transparent",
            text_color=MUTED,
            command=self.hide,
        )

        # ===== Scan prompt (results hidden) =====
        self.scan_panel = ctk.CTkFrame(self, fg_color="transparent")
        self.scan_btn = ctk.CTkButton(
            self.scan_panel,
            text="Show All Possible Combos",
            height=44,
            corner_radius=14,
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            command=self.show,
        )
        self.scan_btn.pack(pady=(24, 6))
        self.scan_lbl = ctk.CTkLabel(self.scan_panel, text="", font=SUB_FONT, text_color=MUTED)
        self.scan_lbl.pack()

        # ===== Results =====
        self.results_panel = ctk.CTkFrame(self, fg_color="transparent")
        self.filter_bar = ctk.CTkSegmentedButton(
            self.results_panel, values=[ALL], command=self._on_filter
        )
        self.filter_bar.pack(fill="x", padx=6, pady=(6, 8))

        self.listing = ctk.CTkScrollableFrame(self.results_panel, fg_color="transparent")
        self.listing.pack(fill="both", expand=True, pady=(0, 12))

        self.empty_lbl = ctk.CTkLabel(
            self.listing,
            text="No combinations found with this filter.",
            font=SUB_FONT,
            text_color=MUTED,
        )

    # ---------- Lifecycle hooks ----------
    def on_enter(self):
        self.refresh()

    def show(self):
        self.show_results = True
        self.refresh()

    def hide(self):
        self.show_results = False
        self._clear_cards()
        self.refresh()

    def refresh(self):
        genres = self.inventory.owned_genres
        types = self.inventory.owned_types
        if not self.show_results:
            self.results_panel.pack_forget()
            self.hide_btn.grid_forget()
            self.title.configure(text="All Combinations")
            self.scan_lbl.configure(text=scan_hint(genres, types))
            self.scan_btn.configure(state="normal" if can_scan(genres, types) else "disabled")
            self.scan_panel.pack(fill="x", padx=22)
            return

        self.scan_panel.pack_forget()
        self.hide_btn.grid(row=0, column=1, rowspan=2, sticky="e")
        self.results_panel.pack(fill="both", expand=True, padx=16)
        self._results = enumerate_all(genres, types)
        labels = filter_labels(count_by_rating(self._results))
        self.filter_bar.configure(values=labels)
        for lbl in labels:
            if label_to_filter(lbl) == self.filter:
                self.filter_bar.set(lbl)
        self._render()

    def on_resize(self, w, h):
        cols = columns_for_width(w)
        if cols != self._cols:
            self._cols = cols
            grid_evenly(self.listing, self._cards, num_cols=cols)

    # ---------- Internals ----------
    def _on_filter(self, label: str):
        self.filter = label_to_filter(label)
        self._render()

    def _clear_cards(self):
        for card in self._cards:
            card.destroy()
        self._cards = []

    def _render(self):
        self._clear_cards()
        self.empty_lbl.grid_forget()

        shown = filter_by_rating(self._results, self.filter)
        self.title.configure(text=f"All Combinations ({len(shown)})")
        if not shown:
            self.empty_lbl.grid(row=0, column=0, columnspan=self._cols, pady=24)
            return
        self._cards = [ComboCard(self.listing, c.genre, c.type, c.rating) for c in shown]
        grid_evenly(self.listing, self._cards, num_cols=self._cols)
