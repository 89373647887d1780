#!/usr/bin/env python3
"""
Basic DazzleQuery walkthrough.

This example demonstrates:
- Searching a document tree with filter_nodes, find_one and find_all
- Limiting results and observing work done with SearchStats
- Searching an xml.etree.ElementTree document through an adapter
"""

import sys
import xml.etree.ElementTree as ET
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlequery import (
    ElementTreeAdapter,
    SearchStats,
    exists_one,
    filter_nodes,
    find_all,
    find_one,
)
from dazzlequery.adapters.dom import Text
from dazzlequery.testing import by_name, sample_document


def document_queries():
    doc = sample_document()

    paragraphs = find_all(by_name('p'), doc)
    print(f"Paragraphs: {len(paragraphs)}")

    texts = filter_nodes(lambda n: isinstance(n, Text), doc)
    print("Text nodes:", [t.data for t in texts])

    stats = SearchStats()
    first = filter_nodes(by_name('p'), doc, limit=1, stats=stats)
    print(f"First paragraph found after testing {stats.nodes_tested} nodes: {first}")

    link = find_one(lambda e: 'href' in e.attribs, doc)
    print(f"First link: {link.get_attribute('href')}")

    print("Has a table?", exists_one(by_name('table'), doc))


def etree_queries():
    root = ET.fromstring(
        "<catalog>"
        "<book id='1'><title>Trees</title></book>"
        "<book id='2'><title>Graphs</title></book>"
        "</catalog>"
    )
    adapter = ElementTreeAdapter()

    titles = find_all(lambda e: e.tag == 'title', root, adapter=adapter)
    print("Titles:", [t.text for t in titles])

    second = find_one(lambda e: e.get('id') == '2', root, adapter=adapter)
    print("Book 2 title:", second.find('title').text)


if __name__ == "__main__":
    print("=== Document tree ===")
    document_queries()
    print("\n=== ElementTree ===")
    etree_queries()
