#!/usr/bin/env python3
"""
Quick Start Example - Louvre collection client

Basic flow: search, resolve the first hit, list its images.
"""

from louvre_mcp import LouvreCollection, ResolutionError
from louvre_mcp.render import render_detail, render_search, render_selection


def main():
    with LouvreCollection() as collection:
        # 1. Search
        print("🔍 Searching for 'venus'...")
        results = collection.search("venus")
        print(render_search(results))

        if not results.records:
            print("⚠️  No results")
            return

        # 2. Resolve the first result
        first_id = results.records[0].id
        print(f"\n🎨 Resolving {first_id}...")
        try:
            record, selection = collection.images(first_id, type="full")
        except ResolutionError as e:
            print(f"❌ {e}")
            return

        print(render_detail(record))

        # 3. Images
        print()
        print(render_selection(record, selection, mode="markdown"))


if __name__ == "__main__":
    main()
