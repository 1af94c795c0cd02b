"""
Invalidation des requetes actives par table.

Chaque flux de lecture (live query) s'abonne aux tables qu'il interroge.
Apres une ecriture, le store notifie les tables modifiees : les abonnes
concernes re-executent leur requete et emettent le nouveau resultat.

Les notifications sont fusionnees : un abonne plus lent que les ecritures
re-execute sa requete une seule fois et voit l'etat le plus recent.

Usage:
    tracker = InvalidationTracker()
    async for rows in live_query(tracker, {"movies"}, load_movies):
        ...
    tracker.notify({"movies"})  # apres une ecriture
"""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from typing import TypeVar

from loguru import logger

T = TypeVar("T")


class Subscription:
    """Abonnement d'une requete active a un ensemble de tables."""

    def __init__(self, tables: Iterable[str]) -> None:
        self.tables = frozenset(tables)
        self._invalidated = asyncio.Event()

    def invalidate(self) -> None:
        self._invalidated.set()

    async def wait(self) -> None:
        """Attend la prochaine invalidation puis la consomme."""
        await self._invalidated.wait()
        self._invalidated.clear()


class InvalidationTracker:
    """
    Registre des abonnements aux tables.

    Doit etre utilise depuis la boucle asyncio (notify() n'est pas thread-safe).
    """

    def __init__(self) -> None:
        self._subscriptions: set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, tables: Iterable[str]) -> Subscription:
        subscription = Subscription(tables)
        self._subscriptions.add(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        self._subscriptions.discard(subscription)

    def notify(self, tables: Iterable[str]) -> None:
        """Invalide les abonnements lisant au moins une des tables."""
        changed = frozenset(tables)
        if not changed:
            return
        logger.debug(f"Tables modifiees: {sorted(changed)}")
        for subscription in list(self._subscriptions):
            if subscription.tables & changed:
                subscription.invalidate()


async def live_query(
    tracker: InvalidationTracker,
    tables: Iterable[str],
    query: Callable[[], Awaitable[T]],
) -> AsyncIterator[T]:
    """
    Flux emettant le resultat de `query` a l'abonnement puis apres chaque invalidation.

    L'abonnement est pris avant la premiere execution : une ecriture concurrente
    a la requete initiale provoque une nouvelle emission. Fermer le generateur
    (aclose() ou annulation de la tache) desabonne la requete.

    Args:
        tracker: Registre des invalidations
        tables: Tables lues par la requete
        query: Fabrique de la coroutine executant la requete
    """
    subscription = tracker.subscribe(tables)
    try:
        yield await query()
        while True:
            await subscription.wait()
            yield await query()
    finally:
        tracker.unsubscribe(subscription)
