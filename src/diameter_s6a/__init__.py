"""Diameter S6a message validation and transaction correlation."""
