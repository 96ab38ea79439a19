"""Stats feature: read-time and materialized player statistics."""
