"""
HiCinema - Catalogue de films synchronise avec TMDB.

Ce package synchronise les listes de films TMDB (a l'affiche, populaires,
mieux notes, a venir) dans un cache SQLite local, et republie ce cache
sous forme de flux reactifs.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, type Result)
- services/ : Couche application (repository de films, orchestration)
- adapters/ : Couche infrastructure (client API, preferences, CLI)
- infrastructure/ : Persistance SQLite et invalidation des flux
"""
