# doc_l10n/document_builder.py
from __future__ import annotations
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup

PARSER = "html.parser"


def build_html(meta: Iterable[Tuple[str, Optional[str]]], body_markup: str) -> str:
    """
    Assemble <html><head><meta name=.. content=..>...</head><body>...</body></html>.
    The body markup is parsed like innerHTML, so stray text and unbalanced
    fragments come out normalized.
    """
    soup = BeautifulSoup("", PARSER)
    html = soup.new_tag("html")
    head = soup.new_tag("head")
    body = soup.new_tag("body")

    for name, content in meta:
        el = soup.new_tag("meta")
        el["name"] = name
        el["content"] = "" if content is None else str(content)
        head.append(el)

    if body_markup:
        fragment = BeautifulSoup(body_markup, PARSER)
        for child in list(fragment.contents):
            body.append(child.extract())

    html.append(head)
    html.append(body)
    soup.append(html)
    return str(html)

