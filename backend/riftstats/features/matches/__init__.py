"""Matches feature: ingestion of Riot match history and stored match queries."""
