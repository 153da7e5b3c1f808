"""Data models for the decisioning package."""
