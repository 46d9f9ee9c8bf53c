"""Service helpers backing the TitleLens CLI and API."""
