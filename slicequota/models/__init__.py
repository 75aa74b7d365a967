"""Data models for slicequota."""
