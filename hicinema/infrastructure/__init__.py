"""
Couche infrastructure : persistance SQLite du cache de films.
"""
