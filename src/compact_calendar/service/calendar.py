# SPDX-License-Identifier: MIT

import pendulum
from rich.text import Text

from compact_calendar.model.calendar_options import CalendarOptions
from compact_calendar.repository.highlights import Highlights
from compact_calendar.repository.rule_store import RuleStore, build_rule_store
from compact_calendar.service.resolve import resolve_year
from compact_calendar.view.view.views.calendar import render


def rule_store_from_highlights(highlights: Highlights) -> RuleStore:
    return build_rule_store(highlights["ranges"], highlights["dates"])


def build_calendar(
    rule_store: RuleStore,
    options: CalendarOptions,
    today: pendulum.Date,
) -> Text:
    """Resolve every day of the year and render the grid in one pass each."""
    year = options["year"]
    annotations = resolve_year(rule_store, options, today)
    return render(year, annotations, options, rule_store.range_spans(year))
