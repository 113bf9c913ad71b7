"""
Debug mode: opt-in verification of algorithm results.

While debug mode is on, every algorithm that has an invariant checker in
``graphconduit.diagnostics.core`` passes its own output through
verify_result before returning it. Topological orders, component
partitions, predecessor chains and spanning trees are all checked this way.
A failed check raises ValueError naming the algorithm; when debug mode is
off verify_result returns immediately and the checkers never run.

The initial state comes from the GRAPHCONDUIT_DEBUG environment variable
("1", "true", "yes" or "on", case-insensitive).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from ..logging import get_logger

ENV_VAR = "GRAPHCONDUIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

logger = get_logger(__name__)


def _enabled_from_env() -> bool:
    return os.getenv(ENV_VAR, "").strip().lower() in _TRUTHY


_debug_enabled: bool = _enabled_from_env()


def is_debug_enabled() -> bool:
    """
    Return whether algorithms currently verify their own results.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn result verification on or off for every algorithm.

    Parameters
    ----------
    enabled:
        Whether algorithms should check their output before returning it.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch result verification on or off.

    The previous state is restored on exit, including when the block
    raises.

    Example
    -------
    >>> with debug_context(True):
    ...     order = topo_sort_kahn(dag)  # order is checked before it is returned
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def verify_result(algorithm: str, check: Callable[..., None], *args: Any) -> None:
    """
    Run an ``assert_*`` checker on an algorithm's output in debug mode.

    Parameters
    ----------
    algorithm:
        Name of the calling algorithm, used as the error message prefix.
    check:
        Checker that raises ValueError on a violated invariant.
    *args:
        Arguments passed to ``check``.

    Raises
    ------
    ValueError
        If debug mode is on and ``check`` rejects the result. The message
        is ``"<algorithm>: <checker message>"``.
    """
    if not _debug_enabled:
        return
    try:
        check(*args)
    except ValueError as exc:
        raise ValueError(f"{algorithm}: {exc}") from exc
    logger.debug("%s: result passed %s", algorithm, check.__name__)
