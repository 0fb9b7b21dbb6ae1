# main.py
#
# What this file is:
# The command-line front end for GitHub Worth. A simple menu that looks up
# one or more GitHub users and prints their hustle score, Naira value,
# affordability tier and score breakdown.
#
# Flow (option 1):
#   username -> worth.get_github_worth -> printed tables -> optional JSON export
#
# Set GITHUB_USER_TOKEN to your own token to include private activity.

import logging
import os

import pandas as pd

from analytics import breakdown_rows
from file_utils import load_usernames, save_result_json
from scoring import AFFORDABILITY_TIERS, format_naira
from worth import get_github_worth

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
GITHUB_USER_TOKEN = os.getenv("GITHUB_USER_TOKEN")


def print_menu():
    print("\nGitHub Worth")
    print("----------------------------")
    print("1. Check a GitHub username")
    print("2. Rank usernames from file")
    print("3. Show affordability tiers")
    print("q. Quit")


def breakdown_frame(breakdown):
    """Score breakdown as a two-column DataFrame (component, points)."""
    return pd.DataFrame(breakdown_rows(breakdown), columns=["component", "points"])


def ranking_frame(results):
    """
    Rank worth results by hustle score, highest first.
    Ties keep input order.
    """
    rows = []
    for r in results:
        rows.append({
            "username": r.get("username"),
            "hustle_score": r.get("hustle_score"),
            "naira_value": format_naira(r.get("naira_value", 0)),
            "tier": r.get("affordability_tier", {}).get("label"),
        })

    df = pd.DataFrame(rows, columns=["username", "hustle_score", "naira_value", "tier"])
    if df.empty:
        return df

    df = df.sort_values("hustle_score", ascending=False, kind="stable").reset_index(drop=True)
    df.index = df.index + 1
    return df


def tiers_frame():
    rows = []
    for tier in AFFORDABILITY_TIERS:
        upper = tier["max_value"]
        rows.append({
            "tier": f"{tier['emoji']} {tier['label']}",
            "from": format_naira(tier["min_value"]),
            "to": "and up" if upper == float("inf") else format_naira(upper),
            "description": tier["description"],
        })
    return pd.DataFrame(rows, columns=["tier", "from", "to", "description"])


def print_result(result):
    tier = result["affordability_tier"]
    stats = result["stats"]

    print(f"\n{result.get('name') or result['username']} (@{result['username']})")
    print("----------------------------")
    print(f"Hustle score : {result['hustle_score']}")
    print(f"Worth        : {format_naira(result['naira_value'])}")
    print(f"Tier         : {tier['emoji']} {tier['label']} - {tier['description']}")
    print(f"Message      : {result['message']}")
    if result.get("is_private_mode"):
        print("Mode         : private activity included")

    print("\nBREAKDOWN")
    print(breakdown_frame(result["breakdown"]).to_string(index=False))

    print("\nSTATS")
    for k in ("followers", "total_stars", "total_forks", "public_repos",
              "original_repos", "active_repos", "account_age_days",
              "private_repos", "private_contributions"):
        if k in stats:
            print(f"{k:22} : {stats[k]}")
    if stats.get("languages"):
        print(f"{'languages':22} : {', '.join(stats['languages'])}")


def check_one():
    username = input("Enter GitHub username: ").strip()
    if username == "":
        print("Error: username cannot be empty.")
        return

    result, err = get_github_worth(username, access_token=GITHUB_USER_TOKEN)
    if err:
        print(f"Could not check {username}: {err}")
        return

    print_result(result)

    answer = input("\nSave result as JSON? (y/N): ").strip().lower()
    if answer == "y":
        path = save_result_json(result)
        print("Saved:", path)


def rank_file():
    usernames = load_usernames()
    if not usernames:
        print("No usernames found. Create usernames.txt with one username per line.")
        return

    results = []
    for u in usernames:
        print(f"Checking {u}...")
        result, err = get_github_worth(u)
        if err:
            print(f"  skipped: {err}")
            continue
        results.append(result)

    if not results:
        print("No users could be scored.")
        return

    print("\nRANKING")
    print(ranking_frame(results).to_string())


def show_tiers():
    print("\nAFFORDABILITY TIERS")
    print(tiers_frame().to_string(index=False))


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    choice = ""
    while choice != "q":
        print_menu()
        choice = input("Choice: ").strip().lower()

        if choice == "1":
            check_one()
        elif choice == "2":
            rank_file()
        elif choice == "3":
            show_tiers()
        elif choice == "q":
            print("Goodbye!")
        else:
            print("Invalid option. Try again.")


if __name__ == "__main__":
    main()
