"""Workspaces and workshop equipment."""
