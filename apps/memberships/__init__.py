"""Time-boxed workspace memberships."""
