# combiners.py
# Combiner registry: ready-made (left, right) -> parent functions.
# MerkleTree accepts any callable; these are the ones the runner can name.

import hashlib
from typing import Any, Callable


class CombinerNotFoundError(KeyError):
    """Raised when a combiner name is absent from the registry."""

    def __str__(self) -> str:
        return str(self.args[0])


def leaf_sha256(value: str) -> str:
    """Hex SHA-256 of a UTF-8 string, for use as a leaf of the sha256 tree."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def _combine_sum(left: Any, right: Any) -> Any:
    return left + right


def _combine_sha256(left: str, right: str) -> str:
    # Order matters: (a, b) and (b, a) must produce different parents.
    return hashlib.sha256(bytes.fromhex(left) + bytes.fromhex(right)).hexdigest()


def _combine_concat(left: Any, right: Any) -> str:
    return f"({left},{right})"


COMBINERS: dict[str, Callable[[Any, Any], Any]] = {
    "sum":    _combine_sum,
    "sha256": _combine_sha256,
    "concat": _combine_concat,
}

ZERO_ELEMENTS: dict[str, Any] = {
    "sum":    0,
    "sha256": "00" * 32,
    "concat": "0",
}


def get_combiner(name: str) -> tuple[Callable[[Any, Any], Any], Any]:
    """Return (combine, zero_element) for a registered combiner."""
    if name not in COMBINERS:
        known = ", ".join(sorted(COMBINERS))
        raise CombinerNotFoundError(f"Combiner '{name}' is not registered. Known: {known}.")
    return COMBINERS[name], ZERO_ELEMENTS[name]
