from __future__ import annotations

import tkinter as tk
from typing import Callable, List, Optional

import customtkinter as ctk

from inventory import GENRES, KINDS, TYPES, Inventory, filter_items
from ui.theme import (
    BODY_FONT,
    HEADING_FONT,
    MUTED,
    OUTLINE_BR,
    OUTLINE_H,
    PRIMARY,
    PRIMARY_H,
    SECONDARY,
    SECONDARY_H,
    TEXT,
)


class InventoryPicker:
    """Widget-free state behind the dialog: active tab and search query."""

    def __init__(self, inventory: Inventory, kind: str = GENRES) -> None:
        self.inventory = inventory
        self.kind = kind
        self.query = ""

    def switch(self, kind: str) -> None:
        if kind not in KINDS:
            raise ValueError(f"unknown inventory kind: {kind!r}")
        # the search box resets whenever the tab changes
        self.kind = kind
        self.query = ""

    def visible_items(self) -> List[str]:
        return filter_items(self.inventory.universe(self.kind), self.query)

    def tab_label(self, kind: str) -> str:
        owned = len(self.inventory.owned(kind))
        total = len(self.inventory.universe(kind))
        return f"{kind.title()} ({owned}/{total})"

    def heading(self) -> str:
        return "Manage Genres" if self.kind == GENRES else "Manage Types"


class InventoryDialog:
    """Modal dialog for ticking off unlocked Genres and Types.

    Usage:
        InventoryDialog.open(parent, inventory, on_change=refresh)

    Every checkbox, select-all and clear-all writes straight through the
    inventory, which persists the change.
    """

    @staticmethod
    def open(
        parent: tk.Widget,
        inventory: Inventory,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        picker = InventoryPicker(inventory)
        top = tk.Toplevel(parent)
        top.title("Inventory")
        top.geometry("640x620")
        top.transient(parent)
        top.grab_set()

        frame = ctk.CTkFrame(top, fg_color="transparent")
        frame.pack(padx=16, pady=16, fill="both", expand=True)

        ctk.CTkLabel(frame, text="Inventory", font=HEADING_FONT, text_color=TEXT).pack(
            anchor="w"
        )
        ctk.CTkLabel(
            frame,
            text="Check off the items you've unlocked in the game.",
            font=BODY_FONT,
            text_color=MUTED,
        ).pack(anchor="w", pady=(2, 10))

        tabs = ctk.CTkSegmentedButton(frame, values=[GENRES, TYPES])
        tabs.pack(fill="x")

        tools = ctk.CTkFrame(frame, fg_color="transparent")
        tools.pack(fill="x", pady=(10, 6))
        tools.grid_columnconfigure(0, weight=1)

        search_var = tk.StringVar(value="")
        search = ctk.CTkEntry(tools, textvariable=search_var, placeholder_text="Search...")
        search.grid(row=0, column=0, columnspan=3, sticky="we", pady=(0, 8))

        heading = ctk.CTkLabel(tools, text="", font=BODY_FONT, text_color=MUTED)
        heading.grid(row=1, column=0, sticky="w")

        listing = ctk.CTkScrollableFrame(frame, corner_radius=12)
        listing.pack(fill="both", expand=True)
        listing.grid_columnconfigure((0, 1, 2), weight=1, uniform="inv")

        def _notify():
            if callable(on_change):
                on_change()

        def _refresh_labels():
            tabs.configure(values=[picker.tab_label(GENRES), picker.tab_label(TYPES)])
            tabs.set(picker.tab_label(picker.kind))
            heading.configure(text=picker.heading())

        def _render():
            for w in listing.winfo_children():
                w.destroy()
            accent, accent_h = (
                (PRIMARY, PRIMARY_H) if picker.kind == GENRES else (SECONDARY, SECONDARY_H)
            )
            for i, item in enumerate(picker.visible_items()):
                var = tk.BooleanVar(value=inventory.owns(picker.kind, item))

                def _toggle(value=item):
                    inventory.toggle(picker.kind, value)
                    _refresh_labels()
                    _notify()

                ctk.CTkCheckBox(
                    listing,
                    text=item,
                    variable=var,
                    command=_toggle,
                    fg_color=accent,
                    hover_color=accent_h,
                    text_color=TEXT,
                ).grid(row=i // 3, column=i % 3, sticky="w", padx=8, pady=6)
            _refresh_labels()

        def _on_tab(label: str):
            kind = GENRES if label.lower().startswith(GENRES) else TYPES
            picker.switch(kind)
            search_var.set("")
            _render()

        def _on_search(*_):
            picker.query = search_var.get()
            _render()

        def _select_all():
            inventory.select_all(picker.kind)
            _render()
            _notify()

        def _clear_all():
            inventory.clear_all(picker.kind)
            _render()
            _notify()

        ctk.CTkButton(
            tools, text="Select All", width=96, command=_select_all
        ).grid(row=1, column=1, padx=(8, 0))
        ctk.CTkButton(
            tools,
            text="Clear All",
            width=96,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=_clear_all,
        ).grid(row=1, column=2, padx=(8, 0))

        tabs.configure(command=_on_tab)
        search_var.trace_add("write", _on_search)

        btns = ctk.CTkFrame(frame, fg_color="transparent")
        btns.pack(fill="x", pady=(12, 0))
        ctk.CTkButton(btns, text="Done", command=top.destroy).pack(side="right")

        _render()
        top.wait_window()
