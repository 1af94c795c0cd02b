"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Source réseau TMDB (httpx + tenacity)
- cli/ : Interface ligne de commande (Typer + Rich)
- preferences.py : Préférences utilisateur persistantes (diskcache)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
