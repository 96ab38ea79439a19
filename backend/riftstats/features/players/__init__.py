"""Players feature: Riot ID lookup and player upsert."""
