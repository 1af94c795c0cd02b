"""
Type Result pour la propagation d'erreurs sans exceptions.

Les frontieres reseau et repository ne levent jamais d'exception : elles
retournent une des trois variantes ci-dessous, que l'appelant traite
explicitement avec isinstance().

- Success(data) : operation reussie, porte la valeur
- Error(exception) : echec, porte la cause
- NoMoreData() : le catalogue n'a plus de donnees pour la requete

Usage:
    result = await network.fetch_movies(MovieCategory.POPULAR, 1)
    if isinstance(result, Success):
        movies = result.data
    elif isinstance(result, Error):
        logger.warning(f"Echec: {result.exception}")
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Resultat d'une operation reussie."""

    data: T


@dataclass(frozen=True)
class Error:
    """
    Resultat d'une operation en echec.

    Attributes:
        exception: Cause de l'echec (suffisante pour journaliser l'erreur)
    """

    exception: Exception


@dataclass(frozen=True)
class NoMoreData:
    """Signal explicite : plus aucune donnee a recuperer (ex: page hors limites)."""


Result = Union[Success[T], Error, NoMoreData]

RESULT_TYPES = (Success, Error, NoMoreData)


async def run_catching(
    block: Callable[[], Awaitable[T]],
    errors: tuple[type[Exception], ...] = (Exception,),
    wrap: Optional[Callable[[Exception], Exception]] = None,
) -> Result[T]:
    """
    Execute une coroutine et convertit son issue en Result.

    Si le bloc retourne deja un Result, il est transmis tel quel. Sinon sa
    valeur est enveloppee dans Success. Les exceptions listees dans `errors`
    deviennent un Error (eventuellement transformees par `wrap`), les autres
    remontent normalement. L'annulation (CancelledError) n'est jamais capturee.

    Args:
        block: Fabrique de la coroutine a executer
        errors: Types d'exceptions converties en Error
        wrap: Transformation optionnelle de l'exception capturee

    Returns:
        Success, Error ou NoMoreData
    """
    try:
        value = await block()
    except errors as e:
        return Error(wrap(e) if wrap is not None else e)
    if isinstance(value, RESULT_TYPES):
        return value
    return Success(value)
