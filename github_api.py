# github_api.py
#
# Purpose:
# The data ingestion layer. Pulls a user's public profile and repos from the
# GitHub REST API and, with the user's own token, aggregate private activity
# from the GraphQL API. Returns clean Python dicts for scoring.
#
# Error handling:
# Nothing in here raises for upstream problems. Every public function
# returns (data, error_string) and exactly one of the two is None.

import logging
import os

import requests

from analytics import to_profile, to_repo

logger = logging.getLogger(__name__)

# ----------------------------
# Config
# ----------------------------

# App-level token, only used to raise public API rate limits.
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")

GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_TIMEOUT = float(os.getenv("GITHUB_TIMEOUT", "20"))

REPOS_PER_PAGE = 100

PRIVATE_STATS_QUERY = """
query {
  viewer {
    createdAt
    contributionsCollection {
      contributionCalendar {
        totalContributions
      }
    }
    repositories(privacy: PRIVATE, first: 1, ownerAffiliations: OWNER) {
      totalCount
    }
  }
}
"""


def _headers(token=None):
    """Base headers for every request, plus bearer auth when a token is set."""
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _quote(username):
    """Escape a username for use as a single URL path segment."""
    return requests.utils.quote(username, safe="")


def _error_for_response(resp):
    """Return a readable error for a non-200 response, or None for 200."""
    if resp.status_code == 200:
        return None
    if resp.status_code == 404:
        return "Not found (404)."
    if resp.status_code == 401:
        return "Unauthorized (401). Check your token."
    if resp.status_code == 403:
        # 403 usually means rate limiting; GitHub explains why in the body.
        msg = ""
        try:
            msg = resp.json().get("message", "")
        except (ValueError, AttributeError):
            msg = ""
        return f"Forbidden / rate limited (403). {msg}".strip()
    return f"GitHub API error: status {resp.status_code}"


def _get(path, params=None, timeout=None):
    """
    Wrapper around requests.get() for the REST API.

    Returns:
      (json_data, error_string)
    """
    url = f"{GITHUB_API_URL}{path}"
    try:
        resp = requests.get(
            url,
            headers=_headers(GITHUB_TOKEN),
            params=params,
            timeout=timeout or GITHUB_TIMEOUT,
        )
    except requests.RequestException as e:
        return None, f"Network error calling GitHub API: {e}"

    err = _error_for_response(resp)
    if err:
        return None, err

    try:
        return resp.json(), None
    except ValueError:
        return None, "GitHub response was not valid JSON."


def _graphql(query, token, timeout=None):
    """
    POST a GraphQL query with the given token.

    GraphQL reports most failures inside a 200 response under "errors",
    so those are turned into an error string too.
    """
    try:
        resp = requests.post(
            f"{GITHUB_API_URL}/graphql",
            headers=_headers(token),
            json={"query": query},
            timeout=timeout or GITHUB_TIMEOUT,
        )
    except requests.RequestException as e:
        return None, f"Network error calling GitHub GraphQL API: {e}"

    err = _error_for_response(resp)
    if err:
        return None, err

    try:
        payload = resp.json()
    except ValueError:
        return None, "GitHub response was not valid JSON."

    if not isinstance(payload, dict):
        return None, "Unexpected response format from GraphQL API."

    if payload.get("errors"):
        messages = "; ".join(e.get("message", "unknown error") for e in payload["errors"])
        return None, f"GitHub GraphQL error: {messages}"

    return payload.get("data") or {}, None


# ----------------------------
# Core API functions
# ----------------------------
def fetch_user(username):
    """
    Fetch a public GitHub profile.

    Returns:
      (profile_dict, None) on success, trimmed to PROFILE_FIELDS
      (None, error_string) otherwise
    """
    username = (username or "").strip()
    if username == "":
        return None, "Username cannot be empty."

    data, err = _get(f"/users/{_quote(username)}")
    if err:
        logger.warning("Error fetching user %s: %s", username, err)
        return None, err

    if not isinstance(data, dict):
        return None, "Unexpected response format for user."

    return to_profile(data), None


def fetch_repos(username):
    """
    Fetch up to 100 of a user's public repos, most recently updated first.

    Returns:
      (list_of_repo_dicts, None) on success
      (None, error_string) otherwise
    """
    username = (username or "").strip()
    if username == "":
        return None, "Username cannot be empty."

    params = {
        "per_page": REPOS_PER_PAGE,
        "sort": "updated",
        "direction": "desc",
    }
    data, err = _get(f"/users/{_quote(username)}/repos", params=params)
    if err:
        logger.warning("Error fetching repos for %s: %s", username, err)
        return None, err

    if not isinstance(data, list):
        return None, "Unexpected response format for repos."

    return [to_repo(r) for r in data], None


def fetch_private_stats(access_token):
    """
    Fetch private activity counts for the owner of access_token.

    Returns:
      ({"private_repos", "private_contributions", "created_at"}, None)
      (None, error_string) when the token is missing/revoked or the call fails
    """
    if not access_token:
        return None, "An access token is required for private stats."

    data, err = _graphql(PRIVATE_STATS_QUERY, access_token)
    if err:
        logger.warning("Error fetching private stats: %s", err)
        return None, err

    try:
        viewer = data["viewer"]
        stats = {
            "private_repos": int(viewer["repositories"]["totalCount"]),
            "private_contributions": int(
                viewer["contributionsCollection"]["contributionCalendar"]["totalContributions"]
            ),
            "created_at": viewer.get("createdAt"),
        }
    except (KeyError, TypeError, ValueError):
        return None, "Unexpected response format for private stats."

    return stats, None
