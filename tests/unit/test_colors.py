"""Tests for family color assignment."""

from fontpoint.core.colors import KnownFonts, color_for


def test_scenario_wraps_palette():
    """Test X, Y, X, Z, W over [A, B, C] gives A, B, A, C, A."""
    palette = ["A", "B", "C"]
    table = {}
    colors = []
    for family in ["X", "Y", "X", "Z", "W"]:
        color, table = color_for(family, table, palette)
        colors.append(color)
    assert colors == ["A", "B", "A", "C", "A"]
    assert list(table) == ["X", "Y", "Z", "W"]


def test_index_is_first_seen_order_modulo_palette():
    """Test family i gets palette[i % N]."""
    palette = ["c0", "c1", "c2", "c3"]
    table = {}
    for i in range(10):
        color, _ = color_for(f"family-{i}", table, palette)
        assert color == palette[i % len(palette)]


def test_seen_family_keeps_its_color():
    """Test re-querying a family returns its original color."""
    palette = ["red", "green"]
    table = {}
    first, _ = color_for("Mono", table, palette)
    for i in range(5):
        color_for(f"other-{i}", table, palette)
    again, _ = color_for("Mono", table, palette)
    assert again == first == "red"
    assert len(table) == 6


def test_known_fonts_table():
    """Test KnownFonts keeps insertion order and resets."""
    known = KnownFonts()
    palette = ["red", "green"]
    assert known.color_for("Sans", palette) == "red"
    assert known.color_for("Mono", palette) == "green"
    assert known.color_for("Sans", palette) == "red"
    assert known.items() == [("Sans", "red"), ("Mono", "green")]
    assert "Mono" in known
    assert len(known) == 2

    known.reset()
    assert len(known) == 0
    assert known.color_for("Mono", palette) == "red"
