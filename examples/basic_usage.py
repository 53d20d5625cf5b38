#!/usr/bin/env python3
"""
Basic RepoList usage example.

Loads the first page of public GitHub repositories, scrolls twice and
fetches star counts for the first few rows.
Run with: python examples/basic_usage.py
"""

import asyncio
import logging

import httpx

from repolist import AsyncGitHubClient, RepositoryListModel, configure_logging


async def main(transport: httpx.AsyncBaseTransport | None = None) -> None:
    configure_logging(level=logging.INFO, http_level=logging.DEBUG)

    async with AsyncGitHubClient(transport=transport) as client:
        model = RepositoryListModel(client.repos)

        print("1. Loading first page...")
        await model.load_repositories()
        if model.error_message:
            print(f"   Failed: {model.error_message}")
            return
        print(f"   Loaded {len(model.repositories)} repositories")

        print("\n2. Scrolling to the end twice...")
        for _ in range(2):
            if not model.repositories:
                break
            await model.load_more_if_needed(model.repositories[-1])
            print(f"   Now {len(model.repositories)} repositories, more: {model.has_more_pages}")

        print("\n3. Loading star counts for the first five rows...")
        rows = model.repositories[:5]
        await asyncio.gather(*(model.load_star_count(repo) for repo in rows))
        for repo in rows:
            state = model.star_counts.get(repo.id)
            shown = state.count if state is not None and state.is_loaded else "-"
            print(f"   {repo.full_name}: {shown}")

        if model.error_message:
            print(f"\n   Last error: {model.error_message}")


if __name__ == "__main__":
    asyncio.run(main())
