"""CLI entry point for sitemap generation.

Usage:
    uv run python -m cedarsite.sitemap --output dist/sitemap.xml
    uv run python -m cedarsite.sitemap --skip-lectures      # static pages only
"""

import argparse
import logging
import sys
from pathlib import Path

from cedarsite.config import SITE, load_cms_settings
from cedarsite.content import ContentFetchError, ContentStore
from cedarsite.seo import render_sitemap

log = logging.getLogger(__name__)

# Default-language paths of the pages that always exist.
STATIC_PATHS: tuple[str, ...] = (
    "/",
    "/about",
    "/about/history",
    "/about/members",
    "/events/upcoming",
    "/events/past",
    "/media",
    "/faq",
    "/sponsors",
    "/contact",
    "/speaker-request",
)

# Smallest field selection that still parses into Lecture records.
_LECTURE_ID_FIELDS = (
    "id",
    "title",
    "guest_name",
    "event_date",
    "createdAt",
    "updatedAt",
    "publishedAt",
    "revisedAt",
)


def lecture_path(lecture_id: str) -> str:
    return f"/events/past/{lecture_id}"


def collect_paths(store: ContentStore | None) -> list[str]:
    """Static pages followed by one detail page per lecture."""
    paths = list(STATIC_PATHS)
    if store is not None:
        lectures = store.get_lectures({"fields": _LECTURE_ID_FIELDS})
        paths.extend(lecture_path(lecture.id) for lecture in lectures)
    return paths


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=f"{SITE.name} sitemap generator")
    parser.add_argument(
        "--output", type=Path, help="Write to this file instead of stdout"
    )
    parser.add_argument(
        "--site-url", default=SITE.url, help=f"Site origin (default: {SITE.url})"
    )
    parser.add_argument(
        "--skip-lectures",
        action="store_true",
        help="Do not query microCMS for lecture detail pages",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.skip_lectures:
        paths = collect_paths(None)
    else:
        settings = load_cms_settings()
        try:
            with ContentStore(settings) as store:
                paths = collect_paths(store)
        except ContentFetchError as e:
            log.error("Could not fetch lectures: %s", e)
            return 1

    xml = render_sitemap(paths, args.site_url)
    if args.output is None:
        sys.stdout.write(xml)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(xml, encoding="utf-8")
        log.info("Saved: %s (%d pages)", args.output, len(paths))
    return 0


if __name__ == "__main__":
    sys.exit(main())
