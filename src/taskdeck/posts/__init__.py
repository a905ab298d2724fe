"""Read-only remote posts browser (fetch once, filter by title)."""
