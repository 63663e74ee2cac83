"""Bookings app package.

This app encapsulates the booking domain: the booking model, the
availability checker, the lifecycle commands (create, confirm, cancel,
complete) and the periodic completion sweep. Overlap avoidance relies on a
per-workspace row lock inside the creating transaction and, on
PostgreSQL, an exclusion constraint.
"""
