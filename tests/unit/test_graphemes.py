"""
Unit tests for grapheme cluster segmentation.
"""

from extstring.graphemes import grapheme_count, graphemes


class TestGraphemes:
    """Tests for graphemes()."""

    def test_ascii(self):
        """Test that ASCII splits into single characters."""
        assert graphemes("abc") == ["a", "b", "c"]

    def test_empty(self):
        """Test that the empty string has no clusters."""
        assert graphemes("") == []

    def test_combining_mark(self):
        """Test that a combining accent joins its base letter."""
        assert graphemes("cafe\u0301") == ["c", "a", "f", "e\u0301"]

    def test_crlf_is_one_cluster(self):
        """Test that CR LF is a single cluster."""
        assert graphemes("a\r\nb") == ["a", "\r\n", "b"]

    def test_flags(self):
        """Test that regional indicators pair up."""
        assert graphemes("\U0001F1EF\U0001F1F5\U0001F1EB\U0001F1F7") == [
            "\U0001F1EF\U0001F1F5",
            "\U0001F1EB\U0001F1F7",
        ]

    def test_join_restores_text(self, sample_text):
        """Test that concatenating the clusters gives back the text."""
        assert "".join(graphemes(sample_text)) == sample_text


class TestGraphemeCount:
    """Tests for grapheme_count()."""

    def test_counts_clusters_not_code_points(self):
        """Test counting a decomposed accented word."""
        text = "n\u0303o\u0308"
        assert len(text) == 4
        assert grapheme_count(text) == 2

    def test_zwj_family(self):
        """Test that an emoji ZWJ sequence counts once."""
        assert grapheme_count("\U0001F468\u200d\U0001F469\u200d\U0001F467") == 1

    def test_matches_graphemes(self, sample_text):
        """Test that the count agrees with the cluster list."""
        assert grapheme_count(sample_text) == len(graphemes(sample_text))
