"""Users app: accounts, roles and membership/meal-credit lookups."""
