"""Data models for kuberviz."""
