"""Data models for asyncsamsungac."""
