#!/usr/bin/env python
"""
Exchange client credentials for a token, then fetch one recipe.

    python scripts/request_recipe.py 3 --base-url http://127.0.0.1:8000
"""
import argparse
import logging
import sys

import httpx

from nem_recipes.app.core.config import get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("request_recipe")


def fetch_recipe(client: httpx.Client, recipe_id: str, client_id: str, client_secret: str) -> httpx.Response:
    token_resp = client.post("/token", json={"client_id": client_id, "client_secret": client_secret})
    if token_resp.status_code != 200:
        logger.error("Token request failed: %s %s", token_resp.status_code, token_resp.text)
        return token_resp
    return client.get(f"/recipes/{recipe_id}", headers={"AUTHORIZATION": f"Bearer {token_resp.text}"})


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Fetch a recipe from the NEM recipe server")
    parser.add_argument("recipe_id")
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    parser.add_argument("--client-id", default=settings.client_id)
    parser.add_argument("--client-secret", default=settings.client_secret)
    args = parser.parse_args()

    try:
        with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
            resp = fetch_recipe(client, args.recipe_id, args.client_id, args.client_secret)
    except httpx.HTTPError:
        logger.exception("Could not reach %s", args.base_url)
        return 1

    print(resp.text)
    return 0 if resp.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
