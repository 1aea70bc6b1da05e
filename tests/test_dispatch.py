"""Tests for BindTable."""

from dispatch import BindTable
from model import BindsConfig, QualifiedBindId

JUMP = QualifiedBindId("engine", "jump")
CLIMB = QualifiedBindId("climbing", "grab")
CROUCH = QualifiedBindId("engine", "crouch")


class TestBindTable:
    """Test BindTable lookup."""

    def test_lookup(self):
        """An input maps to the bind it's assigned to."""
        table = BindTable()
        table.apply_binds({JUMP: ["SPACE"], CROUCH: ["C"]})
        assert table.binds_for("SPACE") == [JUMP]
        assert table.binds_for("space") == [JUMP]
        assert table.binds_for("X") == []

    def test_shared_input_in_id_order(self):
        """Several binds on one input come back in bind id order."""
        table = BindTable()
        table.apply_binds({JUMP: ["SPACE"], CLIMB: ["SPACE"]})
        assert table.binds_for("SPACE") == [CLIMB, JUMP]
        assert table.conflicts() == {"SPACE": [CLIMB, JUMP]}

    def test_apply_replaces_previous(self):
        """A second apply discards the first table."""
        table = BindTable()
        table.apply_binds({JUMP: ["SPACE"]})
        table.apply_binds({JUMP: ["J"]})
        assert table.binds_for("SPACE") == []
        assert table.binds_for("J") == [JUMP]
        assert table.apply_count == 2

    def test_from_binds_config(self):
        """BindsConfig.apply_binds feeds the table without empty slots."""
        binds = BindsConfig({JUMP: [None, "GAMEPAD_A"]})
        table = BindTable()
        binds.apply_binds(table)
        assert table.binds_for("GAMEPAD_A") == [JUMP]
        assert table.conflicts() == {}
