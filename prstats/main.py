"""prstats entry point.

Computes the average time between "ready for review" and "merged" for pull
requests merged in an organization or repository during a period.

Usage:
    prstats --org my-org --period 1w
    prstats --org my-org --repo my-repo --since 2024-01-01 --until 2024-03-31 --user alice,bob
    prstats --org my-org --period 3mo --all-authors --export csv > prs.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from prstats.adapters import GitHubAdapter
from prstats.config import AppConfig, load_config
from prstats.dates import parse_date, parse_period, to_iso
from prstats.errors import ConfigError, PrStatsError
from prstats.export import EXPORT_FORMATS, export_data
from prstats.logging import setup_logging
from prstats.models import AggregateResult
from prstats.models.duration import format_hours
from prstats.services import calculate_average_duration, load_pull_requests

LOG = logging.getLogger("prstats.main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="prstats",
        description="Average duration from 'ready for review' to 'merged' for GitHub pull requests",
    )
    parser.add_argument("--org", "-o", required=True, help="GitHub organization name")
    parser.add_argument("--repo", "-r", help="Limit to one repository (name or owner/name)")
    window = parser.add_mutually_exclusive_group(required=True)
    window.add_argument(
        "--period",
        "-p",
        help="Time period back from now, e.g. '2d', '1w', '3mo', '1y'",
    )
    window.add_argument("--since", help="Start date (YYYY-MM-DD), inclusive")
    parser.add_argument("--until", help="End date (YYYY-MM-DD), inclusive")
    authors = parser.add_mutually_exclusive_group()
    authors.add_argument(
        "--user",
        "-u",
        action="append",
        default=[],
        help="GitHub username(s); repeat or comma-separate (default: the authenticated user)",
    )
    authors.add_argument(
        "--all-authors",
        action="store_true",
        help="Do not filter by author",
    )
    parser.add_argument("--token", "-t", help="GitHub personal access token (default: GITHUB_TOKEN)")
    parser.add_argument("--export", choices=EXPORT_FORMATS, help="Export data in the given format to stdout")
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress messages; log only warnings and errors",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    return parser.parse_args(argv)


def split_users(values: List[str]) -> List[str]:
    """Flatten repeated/comma-separated --user values, dropping blanks and duplicates."""
    users: List[str] = []
    seen = set()
    for value in values:
        for name in value.split(","):
            name = name.strip().lstrip("@")
            if name and name.lower() not in seen:
                seen.add(name.lower())
                users.append(name)
    return users


def resolve_token(args: argparse.Namespace, config: AppConfig) -> str:
    """--token wins over config and GITHUB_TOKEN / GITHUB_TOKEN_FILE."""
    token = args.token or config.github_token_resolved
    if not token:
        raise ConfigError("GitHub token required: pass --token or set GITHUB_TOKEN")
    return token


def resolve_users(args: argparse.Namespace, adapter: GitHubAdapter) -> List[str]:
    """Users from --user; none with --all-authors; else the token owner."""
    users = split_users(args.user)
    if users or args.all_authors:
        return users
    return [adapter.get_authenticated_user()]


def print_summary(result: AggregateResult) -> None:
    average = result.average_duration_hours
    if average is None:
        print("No pull requests found in the specified period.")
        return
    print(f"\nAverage merge duration: {format_hours(average)} hours over {result.count} pull request(s).")


def run(args: argparse.Namespace, config: AppConfig) -> AggregateResult:
    """Resolve inputs, find pull requests and aggregate their durations."""
    log_progress = not args.quiet and args.export is None
    since = parse_period(args.period) if args.period else parse_date(args.since)
    until = parse_date(args.until) if args.until else None

    adapter = GitHubAdapter(
        token=resolve_token(args, config),
        api_url=config.github.api_url,
        timeout=config.github.timeout,
    )
    users = resolve_users(args, adapter)
    if log_progress:
        LOG.info("Considering merged PRs since %s", to_iso(since))

    references = load_pull_requests(adapter, users, args.org, args.repo, since, until, log_progress=log_progress)
    return calculate_average_duration(adapter, references, log_progress=log_progress)


def main(argv: list[str] | None = None) -> int:
    """Entry point: run the report and print or export it."""
    args = parse_args(argv)
    config = load_config(args.config)
    setup_logging(config.logging, quiet=args.quiet)

    try:
        result = run(args, config)
        if args.export:
            export_data(result, args.export)
        else:
            print_summary(result)
    except KeyboardInterrupt:
        return 130
    except PrStatsError as e:
        LOG.error("Error: %s", e)
        return 1
    except Exception as e:
        LOG.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
