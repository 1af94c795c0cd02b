"""
Politique de retry sur rate limiting (HTTP 429) pour l'API TMDB.

Le nombre de tentatives est configurable (HICINEMA_HTTP_MAX_ATTEMPTS). La
valeur par defaut est 1 : la requete n'est pas relancee et le 429 remonte
a l'appelant comme toute autre erreur de transport.

Usage:
    response = await request_with_retry(client, "GET", "/movie/popular", max_attempts=3)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        f"Rate limit TMDB, nouvelle tentative {retry_state.attempt_number + 1}"
    )


def _retry_after_or_backoff(max_wait: int):
    """Attend Retry-After quand TMDB le fournit, sinon backoff exponentiel avec jitter."""
    backoff = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        retry_after = getattr(error, "retry_after", None)
        if retry_after:
            return float(min(retry_after, max_wait))
        return backoff(retry_state)

    return wait


def with_retry(max_attempts: int = 1, max_wait: int = 60):
    """
    Decorateur relancant sur RateLimitError (Retry-After ou backoff exponentiel).

    Args:
        max_attempts: Nombre maximum de tentatives (1 = pas de retry)
        max_wait: Delai maximum entre deux tentatives en secondes

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=_retry_after_or_backoff(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP, les 429 etant convertis en RateLimitError.

    Les autres statuts d'erreur levent httpx.HTTPStatusError sans retry.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL (relative a la base_url du client)
        max_attempts: Nombre maximum de tentatives sur 429
        **kwargs: Arguments passes a client.request()

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
        httpx.TransportError: Timeout, connexion refusee, etc.
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = int(retry_after_header) if retry_after_header else None
            raise RateLimitError(retry_after)
        response.raise_for_status()
        return response

    return await _do_request()
