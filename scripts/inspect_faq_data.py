"""Inspect an FAQ dataset and resolve navigation URLs against it."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections import Counter

from faqnav.aggregation import build_faq_tree
from faqnav.exceptions import FaqNavError
from faqnav.formatter import format_tree, summarize
from faqnav.navigator import Navigator
from faqnav.schemas import FaqRecord
from faqnav.search import search_records
from faqnav.store import RecordStore, load_records


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect an FAQ dataset: summary, tree and URL resolution.")
    parser.add_argument("source", help="JSON file path or http(s) URL of the record list")
    parser.add_argument("--query", help="Query string to resolve (e.g. 'category=Billing&question=...')")
    parser.add_argument("--search", help="Print questions containing this text")
    parser.add_argument("--counts", action="store_true", help="Show record counts per category and section")
    args = parser.parse_args()

    try:
        inspect_dataset(args)
    except FaqNavError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def inspect_dataset(args: argparse.Namespace) -> None:
    records = asyncio.run(load_records(args.source))
    store = RecordStore(records)
    tree = build_faq_tree(store.records)

    print(summarize(store.records, tree))

    if args.counts:
        categories, sections = collect_stats(store.records)
        print("\nCategories:")
        for name, count in categories.items():
            print(f"{name}: {count}")
        print("\nSections:")
        for (category, section), count in sections.items():
            print(f"{category} / {section}: {count}")

    if args.search is not None:
        print("\nSearch:")
        navigator = Navigator(store)
        for record in search_records(store.records, args.search):
            print(f"{record.question} -> {navigator.link_for(record)}")

    navigator = Navigator(store, query=args.query or "")
    if args.query is not None:
        settlement = navigator.settle()
        print("\nResolution:")
        for correction in settlement.corrections:
            print(f"{correction.correction.value}: {navigator.url_for(correction.state)}")
        print(f"final: {navigator.url}")

    print()
    print(format_tree(tree, state=navigator.state if args.query is not None else None))


def collect_stats(records: tuple[FaqRecord, ...]) -> tuple[Counter, Counter]:
    categories = Counter()
    sections = Counter()
    for record in records:
        categories[record.category] += 1
        sections[(record.category, record.section)] += 1
    return categories, sections


if __name__ == "__main__":
    main()
