import pytest

from solver.block_classifier import BlockType, classify_cell, infer_block_type


@pytest.mark.parametrize(
    "label",
    [None, "", "Study Hall", "evening study hall (library)", "Free", "Open gym", "blank"],
)
def test_free_labels(label):
    assert infer_block_type(label) is BlockType.FREE


@pytest.mark.parametrize(
    "label",
    [
        "Breakfast",
        "Lunch",
        "Dinner",
        "Staff Meeting",
        "Assembly",
        "Dorm check-in",
        "Lights Out",
        "Religious studies",
        "Athletics",
        "PE",
        "Advisory",
        "WIN",
        "Block A",
        "block c",
        "B",
    ],
)
def test_fixed_labels(label):
    assert infer_block_type(label) is BlockType.FIXED


def test_unrecognized_label_defaults_to_fixed():
    assert infer_block_type("Orchestra rehearsal") is BlockType.FIXED


def test_free_words_win_over_fixed_words():
    # "free" is checked before the fixed vocabulary.
    assert infer_block_type("Free after lunch") is BlockType.FREE


def test_override_forces_free_for_any_label():
    assert classify_cell("Breakfast", forced_free=True) is BlockType.FREE
    assert classify_cell("Block A", forced_free=True) is BlockType.FREE
    assert classify_cell("Breakfast", forced_free=False) is BlockType.FIXED
