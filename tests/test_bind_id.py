"""Tests for QualifiedBindId parsing and ordering."""

import pytest

from model import QualifiedBindId


class TestParse:
    """Test QualifiedBindId.parse()."""

    def test_parses_module_and_local(self):
        """'module:local' splits into both parts."""
        bind_id = QualifiedBindId.parse("demo:attack")
        assert bind_id.module_id == "demo"
        assert bind_id.local_id == "attack"
        assert bind_id.is_valid

    def test_parse_equals_constructed(self):
        """Parsed and constructed ids are equal and hash alike."""
        assert QualifiedBindId.parse("demo:attack") == QualifiedBindId("demo", "attack")
        assert hash(QualifiedBindId.parse("demo:attack")) == hash(QualifiedBindId("demo", "attack"))

    @pytest.mark.parametrize("text", ["attack", "", ":attack", "demo:", "a:b:c", ":"])
    def test_malformed_is_invalid(self, text):
        """Text without exactly two non-empty parts is invalid, not an error."""
        assert not QualifiedBindId.parse(text).is_valid

    def test_case_insensitive(self):
        """Ids compare case-insensitively."""
        assert QualifiedBindId.parse("Engine:AutoMoveMode") == QualifiedBindId("engine", "automovemode")

    def test_display_keeps_spelling(self):
        """display keeps the declared spelling while str() is normalized."""
        bind_id = QualifiedBindId.parse("Engine:Jump")
        assert bind_id.display == "Engine:Jump"
        assert str(bind_id) == "engine:jump"


class TestOrdering:
    """Test ordering over (module, local)."""

    def test_module_first(self):
        """Module id is compared before local id."""
        assert QualifiedBindId("alpha", "zzz") < QualifiedBindId("beta", "aaa")

    def test_local_breaks_ties(self):
        """Local id orders ids from the same module."""
        assert QualifiedBindId("alpha", "a") < QualifiedBindId("alpha", "b")

    def test_sorted(self):
        """A list of ids sorts by module then local."""
        ids = [QualifiedBindId("beta", "jump"), QualifiedBindId("alpha", "run"), QualifiedBindId("alpha", "jump")]
        assert [str(i) for i in sorted(ids)] == ["alpha:jump", "alpha:run", "beta:jump"]
