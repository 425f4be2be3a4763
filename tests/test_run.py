import pytest
from rich.console import Console

from fixed_merkle import config, display, run
from fixed_merkle.merkle import MerkleTree
from fixed_merkle.models import TreeConfig


@pytest.fixture
def recorded(monkeypatch):
    """Swap the display console for a recording one and return it."""
    console = Console(record=True, width=200, color_system=None)
    monkeypatch.setattr(display, "console", console)
    return console


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    for var in ("MERKLE_LEVELS", "MERKLE_COMBINER", "MERKLE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def test_banner_shows_capacity(recorded):
    display.banner(TreeConfig(levels=3, combiner="sum"), 16)
    text = recorded.export_text()
    assert "Fixed-Depth Merkle Tree" in text
    assert "16" in text
    assert "sum" in text


def test_proof_table_lists_each_level(recorded):
    tree = MerkleTree(2, [5, 3])
    display.proof(0, 5, tree.proof(0))
    text = recorded.export_text()
    assert "PROOF leaf[0]" in text
    assert text.count("left") == 2


def test_layers_table_shows_every_level(recorded):
    tree = MerkleTree(2, ["a", "b", "c"], combine=lambda a, b: f"({a},{b})", zero_element="0")
    display.tree_layers(tree)
    text = recorded.export_text()
    assert "((a,b),(c,0))" in text
    assert "a, b, c" in text


def test_halt_renders_reason(recorded):
    display.halt("Tree is full")
    assert "Tree is full" in recorded.export_text()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("combiner", ["sum", "sha256", "concat"])
def test_main_succeeds_for_each_combiner(recorded, env, combiner):
    env.setenv("MERKLE_LEVELS", "3")
    env.setenv("MERKLE_COMBINER", combiner)

    assert run.main() == 0
    text = recorded.export_text()
    assert "BULK INSERT" in text
    assert "Run complete." in text


def test_main_halts_when_tree_overflows(recorded, env):
    env.setenv("MERKLE_LEVELS", "1")

    assert run.main() == 1
    assert "Tree is full" in recorded.export_text()


def test_main_rejects_unknown_combiner(recorded, env):
    env.setenv("MERKLE_COMBINER", "md4")

    assert run.main() == 1
    text = recorded.export_text()
    assert "Invalid configuration: Combiner 'md4' is not registered" in text
