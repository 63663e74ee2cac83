"""Cantina meal-credit subscriptions."""
