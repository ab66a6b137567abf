from applypatch.patching.seek import seek_sequence

LINES = ["alpha", "beta", "gamma", "beta", "delta"]


class TestSeekSequenceExact:
    """Tests for exact matching in seek_sequence."""

    def test_finds_first_match(self):
        """Smallest matching index is returned."""
        assert seek_sequence(LINES, ["beta"], 0, False) == 1

    def test_respects_start(self):
        """Matches before the start index are ignored."""
        assert seek_sequence(LINES, ["beta"], 2, False) == 3

    def test_start_on_match(self):
        """A match beginning exactly at start is accepted."""
        assert seek_sequence(LINES, ["gamma"], 2, False) == 2

    def test_multi_line_pattern(self):
        """All pattern lines must match consecutively."""
        assert seek_sequence(LINES, ["beta", "delta"], 0, False) == 3
        assert seek_sequence(LINES, ["beta", "gamma"], 0, False) == 1

    def test_not_found(self):
        """Missing pattern returns None."""
        assert seek_sequence(LINES, ["omega"], 0, False) is None

    def test_pattern_longer_than_remaining(self):
        """A pattern that cannot fit after start returns None."""
        assert seek_sequence(LINES, ["beta", "delta"], 4, False) is None
        assert seek_sequence(["a"], ["a", "b"], 0, False) is None

    def test_start_past_end(self):
        """Start beyond the sequence returns None."""
        assert seek_sequence(LINES, ["alpha"], 10, False) is None

    def test_empty_pattern_matches_at_start(self):
        """An empty pattern matches where the search begins."""
        assert seek_sequence(LINES, [], 2, False) == 2

    def test_empty_lines(self):
        """Nothing is found in an empty sequence."""
        assert seek_sequence([], ["a"], 0, False) is None

    def test_exact_is_whitespace_sensitive(self):
        """Default comparison does not ignore whitespace."""
        assert seek_sequence(["  beta"], ["beta"], 0, False) is None
        assert seek_sequence(["beta "], ["beta"], 0, False) is None


class TestSeekSequenceEndOfFile:
    """Tests for end-of-file anchored matching."""

    def test_match_at_end(self):
        """A match ending at the last line is accepted."""
        assert seek_sequence(LINES, ["beta", "delta"], 0, True) == 3

    def test_earlier_match_rejected(self):
        """Earlier occurrences are skipped when anchored to the end."""
        assert seek_sequence(LINES, ["beta"], 0, True) is None

    def test_end_match_before_start_rejected(self):
        """The only end-anchored position must still be at or after start."""
        assert seek_sequence(LINES, ["delta"], 4, True) == 4
        assert seek_sequence(["a", "b"], ["a", "b"], 1, True) is None

    def test_empty_pattern_anchors_to_length(self):
        """An empty end-anchored pattern matches at the end."""
        assert seek_sequence(LINES, [], 0, True) == len(LINES)


class TestSeekSequenceLenient:
    """Tests for opt-in whitespace tolerant matching."""

    def test_trailing_whitespace_ignored(self):
        """Trailing whitespace differences match in lenient mode."""
        lines = ["def f():   ", "    return 1"]
        assert seek_sequence(lines, ["def f():", "    return 1"], 0, False) is None
        assert seek_sequence(lines, ["def f():", "    return 1"], 0, False, lenient=True) == 0

    def test_surrounding_whitespace_ignored(self):
        """Indentation differences match in lenient mode."""
        lines = ["class A:", "    return 1"]
        assert seek_sequence(lines, ["return 1"], 0, False, lenient=True) == 1

    def test_exact_match_preferred(self):
        """An exact match wins over an earlier lenient one."""
        lines = ["value ", "value"]
        assert seek_sequence(lines, ["value"], 0, False, lenient=True) == 1

    def test_lenient_honours_end_of_file(self):
        """Lenient passes still respect the end-of-file anchor."""
        lines = ["x ", "y", "x "]
        assert seek_sequence(lines, ["x"], 0, True, lenient=True) == 2
