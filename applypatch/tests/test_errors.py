"""Unit tests for patch application errors."""

import pytest

from applypatch.errors import (
    ApplyPatchError,
    ApplyPatchErrorType,
    ContextNotFoundError,
    PatternNotFoundError,
)


class TestContextNotFoundError:
    """Tests for ContextNotFoundError."""

    def test_message_format(self):
        """Message names the missing context and the file."""
        error = ContextNotFoundError("src/app.py", "class Foo:")
        assert str(error) == "Failed to find context 'class Foo:' in src/app.py"

    def test_attributes(self):
        """Error exposes its type, path and context."""
        error = ContextNotFoundError("src/app.py", "class Foo:")
        assert error.error_type == ApplyPatchErrorType.CONTEXT_NOT_FOUND
        assert error.path == "src/app.py"
        assert error.context == "class Foo:"
        assert error.details == {"context": "class Foo:"}

    def test_is_apply_patch_error(self):
        """Can be caught as the base error."""
        with pytest.raises(ApplyPatchError):
            raise ContextNotFoundError("a", "b")


class TestPatternNotFoundError:
    """Tests for PatternNotFoundError."""

    def test_message_format(self):
        """Message contains the file and the old lines."""
        error = PatternNotFoundError("src/app.py", ["def foo():", "    pass"])
        assert str(error) == "Failed to find expected lines in src/app.py:\ndef foo():\n    pass"

    def test_long_block_truncated(self):
        """Old lines are cut at 200 characters with an ellipsis."""
        error = PatternNotFoundError("f.txt", ["y" * 150, "z" * 150])
        message = str(error)
        block = ("y" * 150 + "\n" + "z" * 150)[:200]
        assert message.endswith(block + "...")
        assert "z" * 50 not in message

    def test_exact_limit_not_truncated(self):
        """A block of exactly the limit gets no ellipsis."""
        error = PatternNotFoundError("f.txt", ["x" * 200])
        assert not str(error).endswith("...")

    def test_attributes(self):
        """Error keeps the full old lines regardless of truncation."""
        old_lines = ["x" * 300]
        error = PatternNotFoundError("f.txt", old_lines)
        assert error.error_type == ApplyPatchErrorType.PATTERN_NOT_FOUND
        assert error.old_lines == old_lines
        assert error.path == "f.txt"
