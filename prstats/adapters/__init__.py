"""Hosting platform adapters (base and implementations)."""

from prstats.adapters.base import HostingAdapter, RemoteRequestFailed
from prstats.adapters.github import GitHubAdapter

__all__ = ["HostingAdapter", "RemoteRequestFailed", "GitHubAdapter"]
