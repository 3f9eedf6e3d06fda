"""Property-based tests for alignment invariants.

Test Coverage:
- Coverage: op spans partition both inputs in order
- Reconstruction: concatenated op lines rebuild both inputs
- Minimality: changed line counts follow from the LCS length
- Linear-space path agrees with the table path
- Positional mode coverage
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import apply_edit_script, lcs_length

from linediff.align import align, group_hunks

lines_strategy = st.lists(st.sampled_from(["a", "b", "c", "d"]), max_size=14)


def assert_partition(ops, old, new):
    old_pos = new_pos = 0
    for op in ops:
        assert op.old_range[0] == old_pos
        assert op.new_range[0] == new_pos
        old_pos, new_pos = op.old_range[1], op.new_range[1]
        assert len(op.old_lines) == op.old_len
        assert len(op.new_lines) == op.new_len
    assert old_pos == len(old)
    assert new_pos == len(new)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestAlignProperties:
    """Property-based tests for align()."""

    @given(lines_strategy, lines_strategy)
    def test_lcs_partitions_inputs(self, old, new):
        """Test that LCS ops cover both inputs without gaps or overlaps."""
        ops = align(old, new)
        assert_partition(ops, old, new)
        assert apply_edit_script(ops) == (old, new)

    @given(lines_strategy, lines_strategy)
    def test_adjacent_tags_differ(self, old, new):
        """Test that neighbouring ops never share a tag."""
        ops = align(old, new)
        for first, second in zip(ops, ops[1:]):
            assert first.tag != second.tag

    @given(lines_strategy, lines_strategy)
    def test_equal_ops_are_equal(self, old, new):
        """Test that equal ops pair identical lines and others carry content."""
        for op in align(old, new):
            if op.tag == "equal":
                assert op.old_lines == op.new_lines
            elif op.tag == "delete":
                assert op.old_len > 0 and op.new_len == 0
            elif op.tag == "insert":
                assert op.old_len == 0 and op.new_len > 0
            else:
                assert op.old_len > 0 and op.new_len > 0

    @given(lines_strategy, lines_strategy)
    def test_script_is_minimal(self, old, new):
        """Test that the script deletes and inserts exactly the non-LCS lines."""
        ops = align(old, new)
        lcs = lcs_length(old, new)
        assert sum(op.old_len for op in ops if op.tag != "equal") == len(old) - lcs
        assert sum(op.new_len for op in ops if op.tag != "equal") == len(new) - lcs

    @given(lines_strategy, lines_strategy)
    def test_linear_space_agrees(self, old, new):
        """Test that the divide-and-conquer path finds an LCS of the same length."""
        ops = align(old, new, max_table_cells=2)
        assert_partition(ops, old, new)
        assert sum(op.old_len for op in ops if op.tag == "equal") == lcs_length(old, new)

    @given(lines_strategy)
    def test_identity(self, lines):
        """Test that aligning a sequence with itself is a single equal op."""
        ops = align(lines, lines)
        assert [op.tag for op in ops] == (["equal"] if lines else [])

    @given(lines_strategy, lines_strategy)
    def test_positional_partitions_inputs(self, old, new):
        """Test coverage for the positional mode."""
        ops = align(old, new, algorithm="positional")
        assert_partition(ops, old, new)
        assert apply_edit_script(ops) == (old, new)

    @given(lines_strategy, lines_strategy, st.integers(min_value=0, max_value=4))
    def test_hunks_contain_all_changes(self, old, new, context):
        """Test that grouping keeps every changed line exactly once."""
        ops = align(old, new)
        hunks = group_hunks(ops, context)
        changed_in_ops = [op.old_range for op in ops if op.tag != "equal"]
        changed_in_hunks = [op.old_range for hunk in hunks for op in hunk.ops if op.tag != "equal"]
        assert changed_in_hunks == changed_in_ops
        for hunk in hunks:
            for op in hunk.ops:
                if op.tag == "equal":
                    assert op.old_len <= 2 * context
