"""
HTML builders shaped like the Hacker News listing markup.
"""
from __future__ import annotations

from typing import Iterable, Optional

from hnscrape.infra.document import HtmlNode, parse_html

DEFAULT_AGE = "2024-01-02T03:04:05 1704164645"


def title_row(
    rank: str = "1.",
    title: str = "Show HN: A tiny scraper",
    href: str = "https://example.com/scraper",
    item_id: int = 1,
) -> str:
    return f"""
<tr class="athing" id="{item_id}">
  <td align="right" valign="top" class="title"><span class="rank">{rank}</span></td>
  <td valign="top" class="votelinks"><center><a id="up_{item_id}" href="vote?id={item_id}&amp;how=up"></a></center></td>
  <td class="title"><a href="{href}" class="titlelink">{title}</a><span class="sitebit comhead"> (<a href="from?site=example.com"><span class="sitestr">example.com</span></a>)</span></td>
</tr>"""


def subtext_row(
    score: Optional[str] = "100 points",
    author: Optional[str] = "pg",
    age_title: Optional[str] = DEFAULT_AGE,
    comments: Optional[str] = "42&nbsp;comments",
    item_id: int = 1,
) -> str:
    parts = []
    if score is not None:
        parts.append(f'<span class="score" id="score_{item_id}">{score}</span> by ')
    if author is not None:
        parts.append(f'<a href="user?id={author}" class="hnuser">{author}</a> ')
    if age_title is not None:
        parts.append(f'<span class="age" title="{age_title}"><a href="item?id={item_id}">3 hours ago</a></span> ')
    parts.append(f'<span id="unv_{item_id}"></span> | <a href="hide?id={item_id}&amp;goto=news">hide</a>')
    if comments is not None:
        parts.append(f' | <a href="item?id={item_id}">{comments}</a>')
    return f"""
<tr>
  <td colspan="2"></td>
  <td class="subtext">{''.join(parts)}</td>
</tr>"""


def spacer_row() -> str:
    return '\n<tr class="spacer" style="height:5px"></tr>'


def post_rows(rank: int = 1, **subtext) -> str:
    item_id = 1000 + rank
    return (
        title_row(rank=f"{rank}.", title=f"Story number {rank}", href=f"https://example.com/{rank}", item_id=item_id)
        + subtext_row(item_id=item_id, **subtext)
        + spacer_row()
    )


def listing_page(rows: Iterable[str], with_more_link: bool = True, with_tbody: bool = False) -> str:
    body = "".join(rows)
    if with_more_link:
        body += (
            '\n<tr class="morespace" style="height:10px"></tr>'
            '\n<tr><td colspan="2"></td><td class="title"><a href="news?p=2" class="morelink" rel="next">More</a></td></tr>'
        )
    if with_tbody:
        body = f"<tbody>{body}</tbody>"
    return f"""<html>
<head><title>Hacker News</title></head>
<body><center>
<table id="hnmain" border="0" cellpadding="0" cellspacing="0" width="85%">
  <tr><td><table border="0" cellpadding="0" cellspacing="0" class="itemlist">{body}
  </table></td></tr>
</table>
</center></body>
</html>"""


def front_page(count: int = 30) -> str:
    return listing_page(post_rows(rank) for rank in range(1, count + 1))


def row_node(markup: str) -> HtmlNode:
    """First ``<tr>`` of ``markup`` wrapped in a table."""
    document = parse_html(f"<html><body><table>{markup}</table></body></html>")
    return document.find("//tr")[0]


def subtext_node(markup: str) -> HtmlNode:
    document = parse_html(f"<html><body><table>{markup}</table></body></html>")
    return document.find("//td[contains(@class, 'subtext')]")[0]
