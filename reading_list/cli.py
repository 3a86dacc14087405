"""Command-line front end for the reading list API."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from reading_list.client import ArticleClient, ArticleClientError, ClientConfig
from reading_list.db.schemas import Article

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="reading-list", description="Manage your reading list")
    parser.add_argument(
        "--api-url",
        default=None,
        help="Base URL of the reading list service (default: $READING_LIST_API_URL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Save an article")
    add.add_argument("title")
    add.add_argument("url")

    ls = sub.add_parser("list", help="Show saved articles, newest first")
    ls.add_argument("--unread", action="store_true", help="Only show unread articles")

    toggle = sub.add_parser("toggle", help="Flip the read flag of an article")
    toggle.add_argument("id", type=int)
    state = toggle.add_mutually_exclusive_group()
    state.add_argument("--read", dest="current_state", action="store_const", const=False,
                       help="Article is currently unread; mark it read")
    state.add_argument("--unread", dest="current_state", action="store_const", const=True,
                       help="Article is currently read; mark it unread")

    rm = sub.add_parser("delete", help="Remove an article")
    rm.add_argument("id", type=int)

    sub.add_parser("health", help="Check service health")
    return parser.parse_args(argv)


def format_article(article: Article) -> str:
    mark = "x" if article.is_read else " "
    return f"[{mark}] {article.id:>5}  {article.title}  <{article.url}>"


def run(args: argparse.Namespace, client: ArticleClient) -> int:
    if args.command == "add":
        article = client.create(args.title, args.url)
        print(format_article(article))
    elif args.command == "list":
        articles: List[Article] = client.get_all()
        if args.unread:
            articles = [a for a in articles if not a.is_read]
        for article in articles:
            print(format_article(article))
    elif args.command == "toggle":
        affected = client.toggle_read(args.id, args.current_state)
        if not affected:
            print(f"No article with id {args.id}.")
    elif args.command == "delete":
        affected = client.delete(args.id)
        if not affected:
            print(f"No article with id {args.id}.")
    elif args.command == "health":
        status = client.health()
        print(f"{status.status} (database {status.database}) at {status.timestamp}")
        return 0 if status.status == "healthy" else 1
    return 0


def main(argv: list[str] | None = None, client: Optional[ArticleClient] = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    if client is None:
        client = ArticleClient(base_url=args.api_url, config=ClientConfig.from_environment())
    try:
        return run(args, client)
    except ArticleClientError as exc:
        detail = f": {exc.detail}" if exc.detail else ""
        print(f"error: {exc}{detail}", file=sys.stderr)
        logger.debug("command failed", exc_info=True)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())
