"""Fragment rendering: expand a fixed row layout once per record.

A :class:`Fragment` is finished markup.  Record values are escaped as they
are substituted; the fragment itself is embedded verbatim by the page.
"""

from __future__ import annotations

import html
from dataclasses import asdict
from string import Template
from typing import Any, Iterable

from fanpage.scraper.errors import ParseError
from fanpage.scraper.models import PlayerRecord, PostRecord

POST_ROW = Template(
    '<tr>\n'
    '<td><a href="$url" target="_blank">$title</a></td>\n'
    '</tr>\n'
)

PLAYER_ROW = Template(
    "<tr>\n"
    "\t<td>$name</td>\n"
    "\t<td>$nation</td>\n"
    "\t<td>$position</td>\n"
    "\t<td>$age</td>\n"
    "</tr>\n"
)


class Fragment(str):
    """Pre-rendered markup, safe to embed without re-escaping."""

    def __html__(self) -> str:
        return str(self)


EMPTY_FRAGMENT = Fragment("")


def render_rows(layout: Template, records: Iterable[Any]) -> Fragment:
    """Expand *layout* for each dataclass record, in input order.

    Raises:
        ParseError: If *layout* is malformed or names a field the records
            do not have.
    """
    if not layout.is_valid():
        raise ParseError(f"Malformed row layout: {layout.template!r}")
    rows = []
    for record in records:
        values = {key: html.escape(str(value)) for key, value in asdict(record).items()}
        try:
            rows.append(layout.substitute(values))
        except KeyError as exc:
            raise ParseError(f"Row layout references unknown field {exc}") from exc
    return Fragment("".join(rows))


def render_posts(posts: Iterable[PostRecord]) -> Fragment:
    return render_rows(POST_ROW, posts)


def render_players(players: Iterable[PlayerRecord]) -> Fragment:
    return render_rows(PLAYER_ROW, players)
