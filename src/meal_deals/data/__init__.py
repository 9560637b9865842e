"""Data models, recipe catalog and store directory."""
