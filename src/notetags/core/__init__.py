"""Pure tag-line logic: no I/O, no shared state."""
