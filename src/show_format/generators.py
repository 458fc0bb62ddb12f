"""Generic generator functions operating on iterables."""

from typing import Callable, Iterable, Iterator, Tuple, TypeVar

__all__ = ("iter_pairs", "slice_between")

T = TypeVar("T")

_MISSING = object()


def iter_pairs(items: Iterable[T]) -> Iterator[Tuple[T, T]]:
    """Yields ``(previous, current)`` pairs from the given iterable.

    The first item only appears in the first pair as ``previous`` and the last
    item only appears in the last pair as ``current``. Iterables with less
    than two items yield nothing.
    """
    last = _MISSING
    for current in items:
        if last is not _MISSING:
            yield last, current  # type: ignore
        last = current


def slice_between(
    items: Iterable[T], start: Callable[[T], bool], stop: Callable[[T], bool]
) -> Iterator[T]:
    """Yields items from the given iterable, starting from the first item that
    matches the ``start`` predicate and stopping at the first item that
    matches the ``stop`` predicate.

    Notes:

    - ``start()`` is not evaluated any more once it has matched.
    - ``stop()`` is evaluated only after ``start()`` has matched, and it is
      evaluated on the item that matched ``start()`` as well.
    - The item that matches ``stop()`` is not yielded.

    Parameters:
        items: the iterable to slice
        start: the predicate to start slicing from
        stop: the predicate to stop slicing at
    """
    started = False
    for item in items:
        started = started or start(item)
        if started:
            if stop(item):
                break
            yield item
