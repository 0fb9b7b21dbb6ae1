# analytics.py
#
# Purpose:
# Date helpers, repo filters and the "stats" block that sits next to a
# hustle score. Also maps raw GitHub REST payloads down to the small set of
# fields the scoring engine reads.
#
# Every function that depends on the current time takes an optional `now`
# so results can be pinned in tests.

from datetime import datetime, timedelta, timezone

ACTIVE_WINDOW_DAYS = 90

PROFILE_FIELDS = [
    "login",
    "avatar_url",
    "name",
    "bio",
    "public_repos",
    "followers",
    "following",
    "public_gists",
    "created_at",
    "html_url",
]

REPO_FIELDS = [
    "name",
    "stargazers_count",
    "forks_count",
    "language",
    "size",
    "updated_at",
    "archived",
    "fork",
]

BREAKDOWN_LABELS = [
    ("followers", "Followers"),
    ("stars", "Stars"),
    ("active_repos", "Active repos"),
    ("original_repos", "Original repos"),
    ("account_age", "Account age"),
    ("language_diversity", "Language diversity"),
    ("private_activity", "Private activity"),
    ("bonuses", "Bonuses"),
    ("penalties", "Penalties"),
]


def _utc_now():
    return datetime.now(timezone.utc)


def as_utc(dt):
    """Treat a naive datetime as UTC; aware datetimes pass through."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def resolve_now(now=None):
    """The evaluation time as an aware datetime, defaulting to the current UTC time."""
    if now is None:
        return _utc_now()
    return as_utc(now)


def parse_github_datetime(value):
    """
    GitHub timestamps look like: '2024-01-01T12:34:56Z'
    Convert that string into an aware datetime (UTC when no offset is given).
    datetime objects pass through. Return None if value is missing or invalid.
    """
    if not value:
        return None

    if isinstance(value, datetime):
        dt = value
    else:
        try:
            # fromisoformat doesn't understand "Z" on older Pythons
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return None

    return as_utc(dt)


def days_since(dt, now=None):
    """
    Return integer days since datetime dt (floor division).
    If dt is None, return None. Future dates give negative numbers.
    """
    if dt is None:
        return None

    now = resolve_now(now)
    delta = now - dt.astimezone(timezone.utc)
    return int(delta.total_seconds() // 86400)


def account_age_days(created_at, now=None):
    """Whole days since the account was created, never below 0."""
    days = days_since(parse_github_datetime(created_at), now=now)
    if days is None:
        return 0
    return max(0, days)


def updated_since(repo, cutoff):
    """True if the repo's updated_at is strictly later than cutoff."""
    updated = parse_github_datetime(repo.get("updated_at"))
    if updated is None:
        return False
    return updated > cutoff


def original_repos(repos):
    """Repos that are neither forks nor archived."""
    return [r for r in repos if not r.get("fork") and not r.get("archived")]


def active_repos(repos, now=None):
    """Unarchived repos updated within the last 90 days."""
    now = resolve_now(now)
    cutoff = now - timedelta(days=ACTIVE_WINDOW_DAYS)
    return [r for r in repos if updated_since(r, cutoff) and not r.get("archived")]


def distinct_languages(repos):
    """Non-empty repo languages in first-seen order."""
    langs = []
    for r in repos:
        lang = r.get("language")
        if lang and lang not in langs:
            langs.append(lang)
    return langs


def to_profile(data):
    """Keep only the user payload fields this project reads."""
    data = data or {}
    return {k: data.get(k) for k in PROFILE_FIELDS}


def to_repo(data):
    """Keep only the repo payload fields this project reads."""
    data = data or {}
    repo = {k: data.get(k) for k in REPO_FIELDS}
    repo["stargazers_count"] = int(repo["stargazers_count"] or 0)
    repo["forks_count"] = int(repo["forks_count"] or 0)
    repo["archived"] = bool(repo["archived"])
    repo["fork"] = bool(repo["fork"])
    return repo


def compute_stats(profile, repos, private_stats=None, now=None):
    """
    Build the stats block shown alongside a score.

    Includes:
      - followers, total stars/forks, public repo count
      - original (non-fork, unarchived) and active (90-day) repo counts
      - distinct languages and account age in days
      - private repo/contribution counts, only when private stats exist
    """
    now = resolve_now(now)
    repos = repos or []

    stats = {
        "followers": int(profile.get("followers") or 0),
        "total_stars": sum(int(r.get("stargazers_count") or 0) for r in repos),
        "total_forks": sum(int(r.get("forks_count") or 0) for r in repos),
        "public_repos": int(profile.get("public_repos") or len(repos)),
        "original_repos": len(original_repos(repos)),
        "active_repos": len(active_repos(repos, now=now)),
        "languages": distinct_languages(repos),
        "account_age_days": account_age_days(profile.get("created_at"), now=now),
    }

    if private_stats:
        stats["private_repos"] = int(private_stats.get("private_repos") or 0)
        stats["private_contributions"] = int(private_stats.get("private_contributions") or 0)

    return stats


def breakdown_rows(breakdown):
    """
    Convert a score breakdown dict into ordered display rows.
    Penalties are shown as a negative number.
    """
    rows = []
    for key, label in BREAKDOWN_LABELS:
        points = breakdown.get(key, 0) or 0
        if key == "penalties":
            points = -points
        rows.append({"component": label, "points": round(points, 1)})
    return rows
