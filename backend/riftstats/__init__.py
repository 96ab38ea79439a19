"""
Riftstats Backend Application Package.

Fetches League of Legends players and match history from the Riot API,
stores them in a relational database and serves player statistics.
"""

__version__ = "1.0.0"
