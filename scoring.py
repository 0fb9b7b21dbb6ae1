# scoring.py
#
# What this file is:
# The hustle score engine. It turns a GitHub profile, its repo list and
# (optionally) private activity counts into a capped score, converts that
# score into Naira, and picks an affordability tier and a message.
#
# Everything here is a pure function of its inputs. The only hidden inputs
# are "now" and the random source, and both can be passed in.

import math
import random
from datetime import timedelta

from analytics import (
    account_age_days,
    active_repos,
    distinct_languages,
    original_repos,
    resolve_now,
    updated_since,
)


# ----------------------------
# Weights and caps
# ----------------------------
FOLLOWER_POINTS = 5
FOLLOWER_CAP = 2500         # reached at 500 followers
STAR_POINTS = 3
STAR_CAP = 3000             # reached at 1000 stars
ACTIVE_REPO_POINTS = 4
ACTIVE_REPO_CAP = 300
ORIGINAL_REPO_POINTS = 2
ORIGINAL_REPO_CAP = 200
ACCOUNT_AGE_POINTS_PER_YEAR = 25
ACCOUNT_AGE_CAP = 250
LANGUAGE_POINTS = 10
LANGUAGE_CAP = 100

PRIVATE_REPO_POINTS = 2
PRIVATE_REPO_CAP = 400
PRIVATE_CONTRIBUTION_POINTS = 0.2
PRIVATE_CONTRIBUTION_CAP = 800

RECENT_BONUS = 50
POLYGLOT_BONUS = 30
FOLLOWER_RATIO_BONUS = 40
BIO_BONUS = 20

STALE_PENALTY = 100
FORKS_ONLY_PENALTY = 150
EMPTY_PROFILE_PENALTY = 200

MAX_SCORE = 10000

RECENT_WINDOW_DAYS = 30
STALE_WINDOW_DAYS = 180

NAIRA_PER_POINT = 2500
LOW_SCORE_THRESHOLD = 50


AFFORDABILITY_TIERS = [
    {
        "label": "Vibes & Data",
        "emoji": "📱",
        "description": "You don't code at all? Well this is enough for snacks, data bundles, and good vibes only",
        "min_value": 0,
        "max_value": 50_000,
    },
    {
        "label": "Small Bills",
        "emoji": "💸",
        "description": "Can settle small bills, maybe a nice meal or two",
        "min_value": 50_000,
        "max_value": 200_000,
    },
    {
        "label": "Side Hustle Energy",
        "emoji": "⚡",
        "description": "Serious side hustle energy - gadgets and weekend trips",
        "min_value": 200_000,
        "max_value": 500_000,
    },
    {
        "label": "Tech Grind Territory",
        "emoji": "🚀",
        "description": "Tech grind territory - new laptop or phone upgrade",
        "min_value": 500_000,
        "max_value": 1_000_000,
    },
    {
        "label": "Recruiter Bait",
        "emoji": "👑",
        "description": "Recruiter-bait level - they're definitely sliding into your DMs",
        "min_value": 1_000_000,
        "max_value": math.inf,
    },
]

MOTIVATIONAL_MESSAGES = [
    "Your code speaks louder than your commits!",
    "Keep pushing, keep grinding, keep building!",
    "The tech streets recognize your hustle!",
    "From Yaba to the world, your code is fire!",
    "GitHub green squares looking healthy!",
    "Your repo game is strong!",
    "The commits don't lie - you're cooking!",
    "Stack Overflow fears you (in a good way)!",
    "Your GitHub is giving main character energy!",
    "The algorithm respects your grind!",
]

LOW_SCORE_MESSAGES = [
    "Everyone starts somewhere - keep building!",
    "Your journey is just beginning!",
    "Time to ship more code and level up!",
    "The comeback is always greater than the setback!",
    "Start pushing those commits - you've got this!",
]


def _round_half_up(x):
    """Nearest integer with .5 rounded up."""
    return int(math.floor(x + 0.5))


def private_activity_score(private_stats):
    """
    Points for private activity, or 0 when no private stats were supplied.

    Each half is capped on its own: private repos at 400 points (200 repos)
    and contributions at 800 points (4000 contributions).
    """
    if not private_stats:
        return 0

    repo_points = min(int(private_stats.get("private_repos") or 0) * PRIVATE_REPO_POINTS, PRIVATE_REPO_CAP)
    contribution_points = min(
        int(private_stats.get("private_contributions") or 0) * PRIVATE_CONTRIBUTION_POINTS,
        PRIVATE_CONTRIBUTION_CAP,
    )
    return repo_points + contribution_points


def calculate_hustle_score(profile, repos, private_stats=None, now=None):
    """
    Compute the hustle score for one GitHub user.

    Inputs:
      profile (dict)
        - followers, following, bio, created_at
      repos (list[dict])
        - stargazers_count, forks_count, language, updated_at, archived, fork
      private_stats (dict | None)
        - private_repos, private_contributions
      now (datetime | None)
        - evaluation time, defaults to the current UTC time

    Output:
      {"score": int, "breakdown": dict}

    The breakdown holds each component before the final floor/cap, so its
    fields can add up to more than the returned score.
    """
    now = resolve_now(now)
    repos = repos or []

    followers = int(profile.get("followers") or 0)
    following = int(profile.get("following") or 0)

    age_days = account_age_days(profile.get("created_at"), now=now)
    years_on_github = age_days / 365

    originals = original_repos(repos)
    actives = active_repos(repos, now=now)
    languages = distinct_languages(repos)
    total_stars = sum(int(r.get("stargazers_count") or 0) for r in repos)

    follower_score = min(followers * FOLLOWER_POINTS, FOLLOWER_CAP)
    star_score = min(total_stars * STAR_POINTS, STAR_CAP)
    active_repo_score = min(len(actives) * ACTIVE_REPO_POINTS, ACTIVE_REPO_CAP)
    original_repo_score = min(len(originals) * ORIGINAL_REPO_POINTS, ORIGINAL_REPO_CAP)
    account_age_score = min(years_on_github * ACCOUNT_AGE_POINTS_PER_YEAR, ACCOUNT_AGE_CAP)
    language_score = min(len(languages) * LANGUAGE_POINTS, LANGUAGE_CAP)
    private_score = private_activity_score(private_stats)

    # Bonuses
    bonuses = 0
    recent_cutoff = now - timedelta(days=RECENT_WINDOW_DAYS)
    if any(updated_since(r, recent_cutoff) for r in repos):
        bonuses += RECENT_BONUS
    if len(languages) > 3:
        bonuses += POLYGLOT_BONUS
    if followers > following * 2 and followers > 10:
        bonuses += FOLLOWER_RATIO_BONUS
    if profile.get("bio"):
        bonuses += BIO_BONUS

    # Penalties
    penalties = 0
    private_repo_count = int((private_stats or {}).get("private_repos") or 0)
    private_contribs = int((private_stats or {}).get("private_contributions") or 0)

    stale_cutoff = now - timedelta(days=STALE_WINDOW_DAYS)
    has_recent_public = any(updated_since(r, stale_cutoff) for r in repos)
    has_private_activity = bool(private_stats) and private_contribs > 10
    if not has_recent_public and not has_private_activity and repos:
        penalties += STALE_PENALTY

    if not originals and repos and private_repo_count == 0:
        penalties += FORKS_ONLY_PENALTY

    if not repos and private_repo_count == 0:
        penalties += EMPTY_PROFILE_PENALTY

    breakdown = {
        "followers": follower_score,
        "stars": star_score,
        "active_repos": active_repo_score,
        "original_repos": original_repo_score,
        "account_age": account_age_score,
        "language_diversity": language_score,
        "private_activity": private_score,
        "bonuses": bonuses,
        "penalties": penalties,
    }

    total = (
        follower_score
        + star_score
        + active_repo_score
        + original_repo_score
        + account_age_score
        + language_score
        + private_score
        + bonuses
        - penalties
    )
    total = max(0, total)
    score = min(_round_half_up(total), MAX_SCORE)

    return {"score": score, "breakdown": breakdown}


def score_to_naira(score):
    """Scale a score to Naira, rounded to the nearest 1000."""
    raw_value = score * NAIRA_PER_POINT
    return _round_half_up(raw_value / 1000) * 1000


def get_affordability_tier(naira_value):
    """Return the tier whose [min_value, max_value) range holds naira_value."""
    for tier in AFFORDABILITY_TIERS:
        if tier["min_value"] <= naira_value < tier["max_value"]:
            return tier
    return AFFORDABILITY_TIERS[-1]


def get_message(score, rng=None):
    """
    Pick a message for the score.

    rng can be any object with a choice() method (random.Random works);
    the module-level random functions are used when it is None.
    """
    rng = rng or random
    if score < LOW_SCORE_THRESHOLD:
        return rng.choice(LOW_SCORE_MESSAGES)
    return rng.choice(MOTIVATIONAL_MESSAGES)


def format_naira(value):
    """Format a Naira amount for display, e.g. 2128000 -> '₦2,128,000'."""
    return f"₦{_round_half_up(value):,}"
