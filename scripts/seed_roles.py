#!/usr/bin/env python3
"""Seed roles through the HTTP API.

Usage:
    export API_URL=http://localhost:8000
    uv run python scripts/seed_roles.py [--file roles.json]

The file holds a list of {"slug", "name", "permissions"} objects. Roles that
already exist keep their grants; only missing permissions are added.
"""
from __future__ import annotations

import argparse
import json
import os
import sys

import httpx

DEFAULT_ROLES = [
    {"slug": "viewer", "name": "Viewer", "permissions": {"post.view": True}},
    {
        "slug": "editor",
        "name": "Editor",
        "permissions": {"post.view": True, "post.edit": True},
    },
    {
        "slug": "admin",
        "name": "Administrator",
        "permissions": {
            "post.view": True,
            "post.edit": True,
            "post.delete": True,
            "role.manage": True,
        },
    },
]


def seed_role(client: httpx.Client, api_url: str, role: dict) -> str:
    r = client.post(f"{api_url}/v1/roles", json=role)
    if r.status_code == 201:
        return "created"
    if r.status_code != 409:
        r.raise_for_status()
    for permission, value in (role.get("permissions") or {}).items():
        r = client.post(
            f"{api_url}/v1/roles/{role['slug']}/permissions",
            json={"permission": permission, "value": value},
        )
        r.raise_for_status()
    return "merged"


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed roles")
    parser.add_argument("--file", type=str, default=None, help="JSON file with roles")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    roles = DEFAULT_ROLES
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            roles = json.load(f)

    with httpx.Client(timeout=30.0) as client:
        for role in roles:
            try:
                outcome = seed_role(client, api_url, role)
            except httpx.HTTPError as e:
                print(f"{role.get('slug')}: failed ({e})", file=sys.stderr)
                return 1
            print(f"{role['slug']}: {outcome}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
