"""Priority helpers for the rule store.

The matcher trusts the order it is given. These helpers keep that order
correct on the store side: sorting loaded rules, placing new rules on top,
and renumbering after the user drags rules into a new order.
"""

from __future__ import annotations

from collections.abc import Sequence

from wind_activities.models.activity import ActivityRule


def sort_by_priority(rules: Sequence[ActivityRule]) -> list[ActivityRule]:
    """Sort rules by ascending priority. Ties keep their original order."""
    return sorted(rules, key=lambda r: r.priority)


def next_top_priority(rules: Sequence[ActivityRule]) -> int:
    """Priority that puts a new rule ahead of every existing one."""
    if not rules:
        return 0
    return min(r.priority for r in rules) - 1


def reprioritize(
    rules: Sequence[ActivityRule], ordered_ids: Sequence[str]
) -> list[ActivityRule]:
    """Renumber rules to follow a new order.

    Args:
        rules: Current rules
        ordered_ids: Rule ids in their new order

    Returns:
        Copies of the rules in ``ordered_ids`` order, with priority set to
        their position. Ids that match no rule are dropped.
    """
    by_id = {rule.id: rule for rule in rules}
    reordered = [by_id[rule_id] for rule_id in ordered_ids if rule_id in by_id]
    return [
        rule.model_copy(update={"priority": index})
        for index, rule in enumerate(reordered)
    ]
