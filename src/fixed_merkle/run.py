# run.py
# Entry point. Config and wiring only. No logic lives here.
#
# Settings come from MERKLE_LEVELS / MERKLE_COMBINER / MERKLE_LOG_LEVEL
# (or a .env file). See config.py.

import logging

from pydantic import ValidationError
from rich.logging import RichHandler

from fixed_merkle import display
from fixed_merkle.combiners import CombinerNotFoundError, get_combiner, leaf_sha256
from fixed_merkle.config import load_config
from fixed_merkle.merkle import MerkleTree, MerkleTreeError

# Demo payloads, inserted one at a time, then as a batch.
SINGLE_ELEMENTS = ["alice", "bob", "carol"]
BULK_ELEMENTS = ["dave", "erin", "frank", "grace"]


def _to_leaf(combiner: str, value: str, position: int):
    """Map a demo payload onto the leaf domain of the chosen combiner."""
    if combiner == "sha256":
        return leaf_sha256(value)
    if combiner == "sum":
        return position + 1
    return value


def main() -> int:
    try:
        config = load_config()
        combine, zero_element = get_combiner(config.combiner)
    except (ValidationError, CombinerNotFoundError) as exc:
        display.halt(f"Invalid configuration: {exc}")
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=display.console, rich_tracebacks=True)],
    )
    try:
        tree = MerkleTree(config.levels, combine=combine, zero_element=zero_element)
        display.banner(config, tree.capacity)
        display.root(tree.root)

        for payload in SINGLE_ELEMENTS:
            leaf = _to_leaf(config.combiner, payload, len(tree))
            tree.insert(leaf)
            display.element_inserted(len(tree) - 1, leaf, tree.root)

        batch = [
            _to_leaf(config.combiner, payload, len(tree) + offset)
            for offset, payload in enumerate(BULK_ELEMENTS)
        ]
        tree.bulk_insert(batch)
        display.bulk_inserted(len(batch), len(tree), tree.root)

        replacement = _to_leaf(config.combiner, "mallory", 99)
        tree.update(1, replacement)
        display.leaf_updated(1, replacement, tree.root)

        display.tree_layers(tree)
        display.root(tree.root)

        index = tree.index_of(replacement)
        display.proof(index, replacement, tree.proof(index))
    except MerkleTreeError as exc:
        display.halt(str(exc))
        return 1

    display.done()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
