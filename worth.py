# worth.py
#
# Purpose:
# Ties the pieces together for one lookup:
#   cache -> GitHub API -> scoring -> result dict -> cache
#
# Private activity is optional. If a token is given but the private fetch
# fails (revoked token, network error), the lookup falls back to
# public-only scoring instead of failing.

import copy
import logging
import os

from analytics import compute_stats, resolve_now
from cache_utils import TTLCache, make_user_key
from github_api import fetch_private_stats, fetch_repos, fetch_user
from scoring import (
    calculate_hustle_score,
    get_affordability_tier,
    get_message,
    score_to_naira,
)

logger = logging.getLogger(__name__)

WORTH_CACHE_MINUTES = float(os.getenv("WORTH_CACHE_MINUTES", "5"))

_default_cache = TTLCache(ttl_seconds=WORTH_CACHE_MINUTES * 60)


def build_worth_result(profile, repos, private_stats=None, now=None, rng=None):
    """
    Score a user and assemble everything a caller needs to show the result.

    Returns a dict with the profile fields (username, avatar_url, name, bio,
    profile_url), hustle_score, naira_value, affordability_tier, message,
    breakdown, stats and is_private_mode.
    """
    now = resolve_now(now)

    scored = calculate_hustle_score(profile, repos, private_stats, now=now)
    score = scored["score"]
    naira_value = score_to_naira(score)

    return {
        "username": profile.get("login"),
        "avatar_url": profile.get("avatar_url"),
        "name": profile.get("name"),
        "bio": profile.get("bio"),
        "profile_url": profile.get("html_url"),
        "hustle_score": score,
        "naira_value": naira_value,
        "affordability_tier": dict(get_affordability_tier(naira_value)),
        "message": get_message(score, rng=rng),
        "breakdown": scored["breakdown"],
        "stats": compute_stats(profile, repos, private_stats, now=now),
        "is_private_mode": private_stats is not None,
    }


def get_github_worth(username, access_token=None, cache=None, now=None, rng=None):
    """
    Look up a GitHub user and compute their worth.

    Inputs:
      username: GitHub login
      access_token: the user's own token; enables private mode when given
      cache: TTLCache for public results (module default when None)
      now / rng: injected time and random source

    Returns:
      (result_dict, None) or (None, error_string)

    Only public lookups are cached; private results depend on the token.
    A cache hit returns a copy of the stored result as it was first built,
    so now and rng only apply to lookups that reach GitHub.
    """
    username = (username or "").strip()
    if username == "":
        return None, "Username is required."

    if cache is None:
        cache = _default_cache
    key = make_user_key(username)

    if not access_token:
        cached = cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return copy.deepcopy(cached), None

    profile, err = fetch_user(username)
    if err:
        return None, err

    repos, err = fetch_repos(username)
    if err:
        return None, err

    private_stats = None
    if access_token:
        private_stats, err = fetch_private_stats(access_token)
        if err:
            logger.warning(
                "Private stats unavailable for %s, scoring public data only: %s",
                username,
                err,
            )
            private_stats = None

    result = build_worth_result(profile, repos, private_stats, now=now, rng=rng)

    if not access_token:
        cache.set(key, copy.deepcopy(result))

    logger.info("Scored %s: %s", result["username"], result["hustle_score"])
    return result, None
