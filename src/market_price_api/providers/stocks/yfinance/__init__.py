"""Yahoo Finance provider package."""
