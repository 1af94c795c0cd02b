"""
Magasin de preferences utilisateur persistant.

Utilise diskcache pour la persistence sur disque : les preferences survivent
aux redemarrages de l'application. Les operations bloquantes sont executees
dans l'executor par defaut pour ne pas bloquer la boucle asyncio.

Cles utilisees par l'application:
- paging:{category} : derniere page chargee d'une liste de films
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any

from diskcache import Cache

from hicinema.core.ports.repositories import IPreferencesStore


class DiskPreferencesStore(IPreferencesStore):
    """
    Preferences cle-valeur asynchrones sur diskcache.

    Example:
        preferences = DiskPreferencesStore(cache_dir="data/preferences")
        await preferences.set("paging:popular", 3)
        page = await preferences.get("paging:popular", 0)
    """

    def __init__(self, cache_dir: str | Path = "data/preferences") -> None:
        """
        Args:
            cache_dir: Repertoire de stockage (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    async def _run(self, func, *args, **kwargs) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args, **kwargs))

    async def get(self, key: str, default: Any = None) -> Any:
        return await self._run(self._cache.get, key, default=default)

    async def set(self, key: str, value: Any) -> None:
        await self._run(self._cache.set, key, value)

    async def delete(self, key: str) -> bool:
        return await self._run(self._cache.delete, key)

    async def clear(self) -> None:
        """Supprime toutes les preferences."""
        await self._run(self._cache.clear)

    def close(self) -> None:
        """Ferme le cache (a appeler a la fin)."""
        self._cache.close()
