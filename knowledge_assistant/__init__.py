"""Local knowledge-base chat assistant."""
