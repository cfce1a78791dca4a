import logging

import customtkinter as ctk

from inventory import Inventory
from pages import AllCombosPage, BestCombosPage, FinderPage
from settings import SettingsStore, get_appearance_mode
from ui.inventory_dialog import InventoryDialog
from ui.theme import BG, MUTED, OUTLINE_BR, OUTLINE_H, PRIMARY, SUB_FONT, TEXT, TITLE_FONT

NAV = (
    ("finder", "Combo Finder"),
    ("best", "Best Combos"),
    ("all", "All Combos"),
)


class App(ctk.CTk):
    def __init__(self, inventory=None):
        super().__init__(fg_color=BG)
        self.title("Game Dev Story Combo Finder")
        self.geometry("1000x760")
        self.minsize(720, 560)
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self.inventory = inventory if inventory is not None else Inventory(SettingsStore())

        # --- Header ---
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=24, pady=(20, 8))
        header.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(header, text="Game Dev Story", font=TITLE_FONT, text_color=TEXT).grid(
            row=0, column=0, sticky="w"
        )
        ctk.CTkLabel(
            header, text="Combo Finder & Inventory", font=SUB_FONT, text_color=MUTED
        ).grid(row=1, column=0, sticky="w")
        self.inventory_btn = ctk.CTkButton(
            header,
            text="",
            height=36,
            corner_radius=10,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=self.open_inventory,
        )
        self.inventory_btn.grid(row=0, column=1, rowspan=2, sticky="e")

        nav = ctk.CTkFrame(header, fg_color="transparent")
        nav.grid(row=2, column=0, columnspan=2, sticky="w", pady=(12, 0))
        self._nav_btns = {}
        for i, (name, label) in enumerate(NAV):
            btn = ctk.CTkButton(
                nav,
                text=label,
                width=120,
                fg_color="transparent",
                text_color=TEXT,
                hover_color=OUTLINE_H,
                command=lambda n=name: self.switch_page(n),
            )
            btn.grid(row=0, column=i, padx=(0, 6))
            self._nav_btns[name] = btn

        # --- Instantiate pages ---
        self._pages = {
            "finder": FinderPage(
                self, self.switch_page, self.inventory, open_inventory=self.open_inventory
            ),
            "best": BestCombosPage(self, self.switch_page, self.inventory),
            "all": AllCombosPage(self, self.switch_page, self.inventory),
        }
        for p in self._pages.values():
            p.grid(row=1, column=0, sticky="nsew")
            p.grid_remove()

        footer = ctk.CTkLabel(
            self,
            text="Unofficial tool for Kairosoft's Game Dev Story.",
            font=("Segoe UI", 11),
            text_color=MUTED,
        )
        footer.grid(row=2, column=0, pady=(0, 10))

        self._current_page_name = "finder"
        self._update_inventory_button()
        self.switch_page(self._current_page_name)

        # Debounced resize handling
        self._resize_job = None
        self.bind("<Configure>", self._on_configure)

        # Clean shutdown
        self._closing = False
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # -------- Navigation --------
    def switch_page(self, name: str):
        self._current_page_name = name
        for n, page in self._pages.items():
            if n == name:
                page.grid()
                page.on_enter()
            else:
                page.grid_remove()
        for n, btn in self._nav_btns.items():
            btn.configure(fg_color=PRIMARY if n == name else "transparent")

    # -------- Inventory --------
    def open_inventory(self):
        InventoryDialog.open(self, self.inventory, on_change=self.on_inventory_changed)
        self.on_inventory_changed()

    def on_inventory_changed(self):
        self._update_inventory_button()
        page = self._pages.get(self._current_page_name)
        if page is not None:
            page.refresh()

    def _update_inventory_button(self):
        self.inventory_btn.configure(
            text=f"Manage Inventory  ({self.inventory.total_owned()})"
        )

    # ---------- Resize (debounced) ----------
    def _on_configure(self, event):
        if self._closing:
            return
        if self._resize_job is not None:
            self.after_cancel(self._resize_job)
        self._resize_job = self.after(30, self._do_resize)

    def _do_resize(self):
        self._resize_job = None
        if self._closing:
            return
        page = self._pages.get(self._current_page_name)
        if page is not None and page.winfo_exists() and hasattr(page, "on_resize"):
            w, h = self.winfo_width(), self.winfo_height()
            page.on_resize(w, h)

    def _on_close(self):
        self._closing = True
        if self._resize_job is not None:
            self.after_cancel(self._resize_job)
            self._resize_job = None
        self.destroy()


def main():
    logging.basicConfig(level=logging.INFO)
    ctk.set_appearance_mode(get_appearance_mode())
    ctk.set_default_color_theme("blue")
    App().mainloop()


if __name__ == "__main__":
    main()
