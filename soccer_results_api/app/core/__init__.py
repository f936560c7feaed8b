"""Cross‑cutting pieces: configuration, logging, database access and errors."""
