"""Rule grammar, date resolution and tag parsing for events lines."""

from event_calendar.rules.grammar import RULE_MATCHERS, RuleMatcher, classify
from event_calendar.rules.resolver import resolve
from event_calendar.rules.tags import Decoration, decorate

__all__ = [
    "RULE_MATCHERS",
    "RuleMatcher",
    "classify",
    "resolve",
    "Decoration",
    "decorate",
]
