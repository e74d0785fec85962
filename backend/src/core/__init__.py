"""Cross-cutting building blocks: settings and logging."""
