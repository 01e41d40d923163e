"""Translation of SDK exceptions into ProviderError."""

from contextlib import contextmanager
from typing import Iterator

from tracklane.core.exceptions import ProviderError


@contextmanager
def provider_call(provider: str) -> Iterator[None]:
    """Re-raise anything the wrapped SDK call throws as ``ProviderError``.

    The original exception is kept as ``__cause__``.
    """
    try:
        yield
    except ProviderError:
        raise
    except Exception as exc:
        raise ProviderError(provider, str(exc) or type(exc).__name__) from exc
