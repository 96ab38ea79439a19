"""Feature packages, one per domain area."""
