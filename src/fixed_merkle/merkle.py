# merkle.py
# Fixed-depth, incrementally updatable binary Merkle tree.
#
# Layer 0 holds the leaves in insertion order, layer `levels` holds the root.
# Missing right-hand siblings are padded with the precomputed root of an
# empty subtree at that level (`zeros`), so the tree never needs to be
# materialised at full width.
#
# The combiner is injected. The tree never hashes anything itself.

import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from fixed_merkle.models import Proof

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MerkleTreeError(Exception):
    """Base class for all tree errors."""


class CapacityExceededError(MerkleTreeError):
    """Raised when an insert would push the leaf count past capacity."""


class IndexOutOfBoundsError(MerkleTreeError, IndexError):
    """Raised when an update or proof targets an invalid leaf index."""

    def __init__(self, message: str, index: int) -> None:
        super().__init__(message)
        self.index = index

    def __reduce__(self):
        return type(self), (self.args[0], self.index)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _add(left: Any, right: Any) -> Any:
    return left + right


def _check_index(index: Any) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Leaf index must be an integer, got {index!r}.")


def _put(layer: list, index: int, value: Any) -> None:
    """Assign `layer[index]`, appending when index is one past the end."""
    if index == len(layer):
        layer.append(value)
    else:
        layer[index] = value


# ---------------------------------------------------------------------------
# MerkleTree
# ---------------------------------------------------------------------------


class MerkleTree(Generic[T]):
    """
    Binary Merkle tree of fixed depth over an append/update-only leaf list.

    Node = combine(left_child, right_child or zeros[level - 1])
    Root = layers[levels][0], or zeros[levels] when the tree is empty

    Example:
        tree = MerkleTree(2, combine=lambda a, b: a + b, zero_element=0)
        tree.insert(5)
        tree.insert(3)
        tree.root            # 8
        tree.proof(0)        # path_elements=[3, 0] path_index=[0, 0]
    """

    def __init__(
        self,
        levels: int,
        elements: Iterable[T] | None = None,
        combine: Callable[[T, T], T] | None = None,
        zero_element: T = 0,
    ) -> None:
        if isinstance(levels, bool) or not isinstance(levels, int) or levels < 0:
            raise ValueError(f"levels must be a non-negative integer, got {levels!r}.")

        self.levels = levels
        self.capacity = 2 << levels
        self.zero_element = zero_element
        self._combine: Callable[[T, T], T] = combine if combine is not None else _add

        leaves: list[T] = list(elements) if elements is not None else []
        if len(leaves) > self.capacity:
            raise CapacityExceededError(
                f"Tree is full: {len(leaves)} elements exceed capacity {self.capacity}."
            )

        self._zeros: list[T] = [zero_element]
        for level in range(1, levels + 1):
            self._zeros.append(self._combine(self._zeros[level - 1], self._zeros[level - 1]))

        self._layers: list[list[T]] = [leaves] + [[] for _ in range(levels)]
        self._rebuild()

    # ------------------------------------------------------------------
    # Tree construction
    # ------------------------------------------------------------------

    def _node(self, level: int, index: int) -> T:
        """Recompute the node at (level, index) from its two children."""
        below = self._layers[level - 1]
        right = below[index * 2 + 1] if index * 2 + 1 < len(below) else self._zeros[level - 1]
        return self._combine(below[index * 2], right)

    def _rebuild(self) -> None:
        for level in range(1, self.levels + 1):
            width = (len(self._layers[level - 1]) + 1) // 2
            self._layers[level] = [self._node(level, i) for i in range(width)]
        logger.debug("Rebuilt %d level(s) over %d leaves", self.levels, len(self._layers[0]))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, element: T) -> None:
        """Append one element and update its path to the root."""
        if len(self._layers[0]) >= self.capacity:
            raise CapacityExceededError("Tree is full")
        self.update(len(self._layers[0]), element)

    def bulk_insert(self, elements: Iterable[T]) -> None:
        """
        Append many elements, then rebuild every level from scratch.

        Cheaper than repeated insert() for large batches: one O(n) rebuild
        instead of n path updates. Nothing is appended if the batch does not
        fit.
        """
        batch = list(elements)
        if len(self._layers[0]) + len(batch) > self.capacity:
            raise CapacityExceededError("Tree is full")
        self._layers[0].extend(batch)
        self._rebuild()

    def update(self, index: int, element: T) -> None:
        """
        Overwrite the leaf at `index`, or append when index == len(tree).

        Only the authentication path of that leaf is recomputed.
        """
        _check_index(index)
        if index < 0 or index > len(self._layers[0]) or index >= self.capacity:
            raise IndexOutOfBoundsError(f"Insert index out of bounds: {index}", index)

        _put(self._layers[0], index, element)
        for level in range(1, self.levels + 1):
            index >>= 1
            _put(self._layers[level], index, self._node(level, index))
        logger.debug("Updated leaf path, root is now %r", self.root)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def proof(self, index: int) -> Proof:
        """
        Authentication path for the leaf at `index`.

        path_elements[level] is the sibling at that level (zero-padded), and
        path_index[level] is 0 when our node is the left child, 1 when right.
        """
        _check_index(index)
        if index < 0 or index >= len(self._layers[0]):
            raise IndexOutOfBoundsError(f"Index out of bounds: {index}", index)

        path_elements: list[T] = []
        path_index: list[int] = []
        for level in range(self.levels):
            layer = self._layers[level]
            sibling = index ^ 1
            path_index.append(index % 2)
            path_elements.append(layer[sibling] if sibling < len(layer) else self._zeros[level])
            index >>= 1

        return Proof(path_elements=path_elements, path_index=path_index)

    def index_of(self, element: T) -> int:
        """Position of the first leaf equal to `element`, or -1."""
        for position, leaf in enumerate(self._layers[0]):
            if leaf == element:
                return position
        return -1

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> T:
        top = self._layers[self.levels]
        return top[0] if top else self._zeros[self.levels]

    @property
    def elements(self) -> list[T]:
        """Shallow copy of the leaves in index order."""
        return list(self._layers[0])

    @property
    def zeros(self) -> list[T]:
        """Empty-subtree root at each level, leaves first."""
        return list(self._zeros)

    @property
    def layers(self) -> list[list[T]]:
        return [list(layer) for layer in self._layers]

    def __len__(self) -> int:
        return len(self._layers[0])
