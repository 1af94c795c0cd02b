"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports stockage :
- IMovieStore : Cache local de films avec flux réactifs
- IPreferencesStore : Préférences utilisateur clé-valeur

Ports client API :
- IMovieNetworkDataSource : Source réseau du catalogue de films
- NetworkMovie / NetworkGenre : Enregistrements décodés depuis l'API
- MovieNetworkError : Erreur unique de la source réseau
"""

from hicinema.core.ports.api_clients import (
    IMovieNetworkDataSource,
    MovieNetworkError,
    NetworkGenre,
    NetworkMovie,
)
from hicinema.core.ports.repositories import IMovieStore, IPreferencesStore

__all__ = [
    # Stockage
    "IMovieStore",
    "IPreferencesStore",
    # Client API
    "IMovieNetworkDataSource",
    "MovieNetworkError",
    "NetworkGenre",
    "NetworkMovie",
]
