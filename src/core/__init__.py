"""Rating table and combination evaluator (pure, no I/O)."""
