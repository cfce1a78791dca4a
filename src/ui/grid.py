# src/ui/grid.py
def grid_evenly(container, widgets, num_cols=2, padx=8, pady=8):
    """Lay ``widgets`` out row by row in ``num_cols`` equal columns."""
    num_cols = max(1, int(num_cols))
    for c in range(num_cols):
        container.grid_columnconfigure(c, weight=1, uniform="col")

    for w in widgets:
        w.grid_forget()

    for i, w in enumerate(widgets):
        r, c = divmod(i, num_cols)
        w.grid(row=r, column=c, sticky="nsew", padx=padx, pady=pady)


def columns_for_width(width: int, min_col_width: int = 260, max_cols: int = 3) -> int:
    if width <= 0:
        return 1
    return max(1, min(max_cols, width // min_col_width))
