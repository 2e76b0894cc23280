#!/usr/bin/env python3
"""
Create a subpage (and optionally its categories) directly in the database.

Usage:
  python scripts/add_page.py --title Toyota [--description "Japanese cars"] [--category "Sports Cars" ...]
"""
from __future__ import annotations

import argparse
import sys

from forum_api.core.validation import TEXT_PATTERN
from forum_api.db.create_tables import create_all
from forum_api.repositories.sql_repository import SQLRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a forum subpage")
    ap.add_argument("--title", required=True, help="Subpage title (letters, digits and spaces)")
    ap.add_argument("--description", help="Optional description")
    ap.add_argument("--category", action="append", default=[], help="Category subject (repeatable)")
    ap.add_argument("--create-tables", action="store_true", help="Create the schema first")
    args = ap.parse_args()

    title = (args.title or "").strip()
    if not TEXT_PATTERN.fullmatch(title):
        raise SystemExit("Invalid title (use letters, digits and spaces)")
    for subject in args.category:
        if not TEXT_PATTERN.fullmatch(subject):
            raise SystemExit(f"Invalid category subject: {subject!r}")

    if args.create_tables:
        create_all()

    repo = SQLRepository()
    if repo.get_subpage_by_title(title):
        raise SystemExit(f"Subpage '{title}' already exists")

    page = repo.create_subpage(title, args.description)
    print("OK: subpage created")
    print(f"  page_id: {page.page_id}")
    print(f"  title: {page.title}")
    for subject in args.category:
        category = repo.create_category(subject, page.page_id)
        print(f"  category {category.cat_id}: {category.subject}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
