# tablefit/tests/test_display_width.py
"""Tests for display width measurement."""

from tablefit.display_width import display_width, find_longest


class TestDisplayWidth:
    """Tests for display_width."""

    def test_ascii(self):
        assert display_width("hello") == 5

    def test_empty(self):
        assert display_width("") == 0

    def test_cjk_is_double_width(self):
        """Wide CJK characters occupy two columns each."""
        assert display_width("日本語") == 6

    def test_mixed_ascii_and_cjk(self):
        assert display_width("ab日本") == 6

    def test_combining_mark_is_zero_width(self):
        """A combining accent adds no columns to its base character."""
        assert display_width("e\u0301") == 1

    def test_zwj_emoji_sequence(self):
        """A family joined with zero-width joiners is a single wide glyph."""
        assert display_width("\U0001F468\u200d\U0001F469\u200d\U0001F467") == 2

    def test_variation_selector_16(self):
        """VS16 turns a text-style heart into a wide emoji."""
        assert display_width("\u2764\ufe0f") == 2

    def test_control_characters_ignored(self):
        assert display_width("a\x07b") == 2

    def test_ambiguous_default_narrow(self, monkeypatch):
        """Box-drawing characters are narrow by default."""
        monkeypatch.delenv("TABLEFIT_AMBIGUOUS_WIDTH", raising=False)
        assert display_width("─│") == 2

    def test_ambiguous_wide_from_env(self, monkeypatch):
        """TABLEFIT_AMBIGUOUS_WIDTH=2 widens ambiguous characters."""
        monkeypatch.setenv("TABLEFIT_AMBIGUOUS_WIDTH", "2")
        assert display_width("─│") == 4
        assert display_width("ab") == 2

    def test_ambiguous_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("TABLEFIT_AMBIGUOUS_WIDTH", "wide")
        assert display_width("─") == 1


class TestFindLongest:
    """Tests for find_longest."""

    def test_longest_by_display_width(self):
        """Width, not character count, decides the longest cell."""
        assert find_longest(["abcd", "日本語"]) == 6

    def test_empty_cells(self):
        assert find_longest(["", ""]) == 0

    def test_no_cells(self):
        assert find_longest([]) == 0
