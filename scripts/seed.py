"""Seed script — registers demo users via the REST API, logs them in and out.

Usage:
    python scripts/seed.py              # uses http://localhost:8000
    python scripts/seed.py http://host  # custom base URL
"""

import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

USERS = [
    {"username": "alice", "password": "password123", "birthday": "1990-04-12"},
    {"username": "bob", "password": "password456"},
    {"username": "carol", "password": "password789", "birthday": "1985-11-02"},
]

# These users are left offline once seeding is done.
OFFLINE = {"bob"}


def register(client: httpx.Client, user: dict) -> None:
    resp = client.post(f"{BASE_URL}/users", json=user)
    if resp.status_code == 201:
        print(f"  Registered {user['username']} (id {resp.json()['id']})")
    elif resp.status_code == 409 or resp.status_code == 400:
        print(f"  {user['username']} already exists, skipping")
    else:
        resp.raise_for_status()


def login(client: httpx.Client, username: str, password: str) -> dict:
    resp = client.post(
        f"{BASE_URL}/user-logins",
        json={"username": username, "password": password},
    )
    resp.raise_for_status()
    return resp.json()


def logout(client: httpx.Client, user_id: int) -> None:
    resp = client.put(f"{BASE_URL}/user-logouts/{user_id}")
    resp.raise_for_status()


def main() -> None:
    print(f"Seeding against {BASE_URL}\n")

    with httpx.Client(timeout=10) as client:
        # 1. Register users
        print("Users:")
        for user in USERS:
            register(client, user)

        # 2. Login, then log out the ones meant to be offline
        print("\nPresence:")
        for user in USERS:
            view = login(client, user["username"], user["password"])
            if user["username"] in OFFLINE:
                logout(client, view["id"])
                print(f"  {user['username']}: OFFLINE")
            else:
                print(f"  {user['username']}: {view['status']}")

    print("\nDone!")


if __name__ == "__main__":
    main()
