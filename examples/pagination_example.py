#!/usr/bin/env python3
"""
Example script demonstrating pagination of repository variables.

This script:
1. Lists the first page of variables of a repository, one variable per page
2. Explicitly fetches the following pages
3. Lists all variables again with auto pagination enabled
4. Iterates lazily over the pages of an environment

Set GHVARS_ACCESS_TOKEN, then run:
    python examples/pagination_example.py OWNER/NAME [ENVIRONMENT]
"""
import logging
import sys

from ghvars.client import get_default_client
from ghvars.repository import Repository


def main():
    """Main function demonstrating pagination."""
    logging.basicConfig(level=logging.DEBUG)
    repo = sys.argv[1]
    environment = sys.argv[2] if len(sys.argv) > 2 else None

    print(f"🚀 Variables of {repo}")
    print("=" * 50)

    with get_default_client() as client:
        client.per_page = 1

        # Only the first page is fetched unless auto pagination is on
        first_page = client.list_actions_variables(repo)
        print(f"✅ {first_page.total_count} variables, first page holds {len(first_page.variables)}")
        for variable in first_page.variables:
            print(f"   {variable.name}={variable.value}")

        page = client.fetch_next_page()
        while page is not None:
            for variable in page["variables"]:
                print(f"   {variable['name']}={variable['value']}")
            page = client.fetch_next_page()
        print()

        client.auto_paginate = True
        everything = client.list_actions_variables(repo)
        print(f"✅ Auto pagination fetched {len(everything.variables)} of {everything.total_count}")
        print()

        if environment:
            path = f"{Repository.path(repo)}/environments/{environment}/variables"
            for index, env_page in enumerate(
                client.paginator.iter_pages(path, items_key="variables")
            ):
                names = ", ".join(item["name"] for item in env_page.items)
                print(f"📄 {environment} page {index + 1}: {names}")


if __name__ == "__main__":
    main()
