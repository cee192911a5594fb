from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def min_items(items: Iterable[T], key: Callable[[T], float]) -> list[T]:
    """
    All items attaining the minimum key, in input order.
    Keys are compared exactly.
    """
    result = []
    best = None
    for item in items:
        k = key(item)
        if not result or k < best:
            result = [item]
            best = k
        elif k == best:
            result.append(item)
    return result


def min_item(items: Iterable[T], key: Callable[[T], float]) -> T:
    """
    First item attaining the minimum key.
    """
    candidates = min_items(items, key)
    if not candidates:
        raise ValueError("min_item() arg is an empty sequence")
    return candidates[0]
