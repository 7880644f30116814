"""Tests for structural equivalence of expression trees."""

import itertools

import pytest

from cwfilter.core.filters.equivalence import (
    comparisons_equivalent,
    find_equivalent,
    groups_equivalent,
    is_equivalent,
)
from tests.helpers import ce, se


class TestComparisonEquivalence:
    """Test equivalence of comparison leaves."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (se("a", "=", "b"), se("a", "=", "b"), True),
            (se("a", "=", "b"), se("b", "=", "a"), True),
            (
                se('"!@#$%ˆ&*()"', "=", '">P{?}|     }}{|"'),
                se('">P{?}|     }}{|"', "=", '"!@#$%ˆ&*()"'),
                True,
            ),
            (se("a", "NOT EXISTS", "b"), se("b", "NOT EXISTS", "a"), True),
            (se("a", "!=", "b"), se("b", "!=", "a"), True),
            (se("a", "!=", "b"), se("b", "=", "a"), False),
            (se("a", "!=", "b"), se("a", "!=", "DIFF"), False),
            (se("a", "!=", "b"), se("DIFF", "!=", "b"), False),
            (se("a", "!=", "b"), se("DIFF", "!=", "a"), False),
            (se("a", "!=", "b"), se("DIFF", "!=", "DIFF2"), False),
            (se("a", "NOT EXISTS"), se("a", "NOT EXISTS", "b"), False),
        ],
    )
    def test_comparisons(self, a, b, expected):
        """Test comparison equivalence in both directions."""
        assert is_equivalent(a, b) is expected
        assert is_equivalent(b, a) is expected

    def test_operator_never_normalized(self):
        """Test that = and != never match, whatever the operands."""
        assert not comparisons_equivalent(se("a", "=", "b"), se("a", "!=", "b"))
        assert not comparisons_equivalent(se("a", "=", ""), se("a", "NOT EXISTS", ""))

    def test_node_method(self):
        """Test the convenience method on nodes."""
        assert se("x", "=", "1").is_equivalent(se("1", "=", "x"))


class TestGroupEquivalence:
    """Test equivalence of groups."""

    root_usage = ce(
        "&&",
        se("$.userIdentity.type", "=", '"Root"'),
        se("$.userIdentity.invokedBy", "NOT EXISTS", ""),
        se("$.eventType", "!=", '"AwsServiceEvent"'),
    )

    kms = ce(
        "&&",
        se("$.eventSource", "=", "kms.amazonaws.com"),
        ce(
            "||",
            se("$.eventName", "=", "DisableKey"),
            se("$.eventName", "=", "ScheduleKeyDeletion"),
        ),
    )

    def test_same_group(self):
        """Test identical groups."""
        assert is_equivalent(self.root_usage, self.root_usage)

    def test_different_order(self):
        """Test children and operands in another order."""
        other = ce(
            "&&",
            se("$.userIdentity.invokedBy", "NOT EXISTS", ""),
            se('"Root"', "=", "$.userIdentity.type"),
            se("$.eventType", "!=", '"AwsServiceEvent"'),
        )
        assert is_equivalent(self.root_usage, other)
        assert is_equivalent(other, self.root_usage)

    def test_sub_groups_in_different_order(self):
        """Test nested groups matched regardless of position."""
        other = ce(
            "&&",
            ce(
                "||",
                se("$.eventName", "=", "ScheduleKeyDeletion"),
                se("$.eventName", "=", "DisableKey"),
            ),
            se("$.eventSource", "=", "kms.amazonaws.com"),
        )
        assert is_equivalent(self.kms, other)
        assert is_equivalent(other, self.kms)

    def test_different_logical_operator(self):
        """Test that && and || never match even with identical children."""
        other = ce("||", *self.root_usage.children)
        assert not is_equivalent(self.root_usage, other)
        assert not is_equivalent(other, self.root_usage)

    def test_one_child_differs(self):
        """Test a single differing value."""
        other = ce(
            "&&",
            se("$.userIdentity.type", "=", '"Rootty"'),
            se("$.userIdentity.invokedBy", "NOT EXISTS", ""),
            se("$.eventType", "!=", '"AwsServiceEvent"'),
        )
        assert not is_equivalent(self.root_usage, other)
        assert not is_equivalent(other, self.root_usage)

    def test_one_child_missing(self):
        """Test groups of different sizes."""
        other = ce("&&", *self.root_usage.children[1:])
        assert not is_equivalent(self.root_usage, other)
        assert not is_equivalent(other, self.root_usage)

    def test_nested_operator_differs(self):
        """Test a nested group with the other logical operator."""
        other = ce(
            "&&",
            se("$.eventSource", "=", "kms.amazonaws.com"),
            ce(
                "&&",
                se("$.eventName", "=", "DisableKey"),
                se("$.eventName", "=", "ScheduleKeyDeletion"),
            ),
        )
        assert not is_equivalent(self.kms, other)

    def test_duplicates_are_consumed_once(self):
        """Test that each child is paired with exactly one counterpart."""
        x = se("a", "=", "1")
        y = se("b", "=", "2")
        assert not is_equivalent(ce("&&", x, x, y), ce("&&", x, y, y))
        assert not is_equivalent(ce("&&", x, y, y), ce("&&", x, x, y))
        assert is_equivalent(ce("&&", x, y, x), ce("&&", x, x, y))

    def test_duplicates_written_in_both_operand_orders(self):
        """Test duplicates that are only equal up to operand order."""
        a = ce("||", se("a", "=", "1"), se("1", "=", "a"), se("b", "=", "2"))
        b = ce("||", se("b", "=", "2"), se("a", "=", "1"), se("a", "=", "1"))
        assert is_equivalent(a, b)

    def test_every_permutation(self):
        """Test that every ordering of the children is equivalent."""
        children = [
            se("$.eventName", "=", "CreateTrail"),
            se("$.eventName", "=", "UpdateTrail"),
            se("$.eventName", "=", "DeleteTrail"),
            ce("&&", se("x", "=", "1"), se("y", "!=", "2")),
        ]
        group = ce("||", *children)
        for permutation in itertools.permutations(children):
            assert is_equivalent(group, ce("||", *permutation))

    def test_groups_equivalent_checks_operator_first(self):
        """Test the group helper directly."""
        assert not groups_equivalent(ce("&&", se("a", "=", "b")), ce("||", se("a", "=", "b")))
        assert groups_equivalent(ce("&&", se("a", "=", "b")), ce("&&", se("b", "=", "a")))


class TestKindMismatch:
    """Test comparing leaves with groups."""

    def test_comparison_vs_group(self):
        """Test that a comparison never matches a group."""
        leaf = se("a", "=", "b")
        group = ce("&&", se("a", "=", "b"))
        assert not is_equivalent(leaf, group)
        assert not is_equivalent(group, leaf)
        assert not leaf.is_equivalent(group)
        assert not group.is_equivalent(leaf)


class TestFindEquivalent:
    """Test candidate lookup."""

    def test_returns_first_match(self):
        """Test the index of the first equivalent candidate."""
        candidates = [se("a", "=", "1"), se("b", "=", "2"), se("2", "=", "b")]
        assert find_equivalent(se("b", "=", "2"), candidates) == 1

    def test_returns_minus_one(self):
        """Test no equivalent candidate."""
        assert find_equivalent(se("c", "=", "3"), [se("a", "=", "1")]) == -1
        assert find_equivalent(se("c", "=", "3"), []) == -1
