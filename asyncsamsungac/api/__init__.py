"""Transports used to reach the air conditioner."""
