"""SEO metadata: page titles, hreflang alternates, structured data, sitemap XML."""

import html
from collections.abc import Iterable
from dataclasses import dataclass

from cedarsite.config import ORGANIZATION, SEO, SITE
from cedarsite.i18n import DEFAULT_LANG, Lang, get_alternate_url, get_localized_path


@dataclass(frozen=True)
class AlternateLink:
    """One ``<link rel="alternate" hreflang=...>`` entry."""

    hreflang: str  # Lang code or "x-default"
    href: str


def page_title(title: str | None, lang: Lang) -> str:
    """Apply the site title template, or return the language's default title."""
    if not title:
        return SEO.default_title[lang]
    return SEO.title_template.replace("%s", title)


def page_description(description: str | None, lang: Lang) -> str:
    return description or SEO.default_description[lang]


def absolute_url(path: str, site_url: str = SITE.url) -> str:
    return site_url.rstrip("/") + path


def alternate_links(path: str, site_url: str = SITE.url) -> list[AlternateLink]:
    """Return hreflang alternates for a page in every language plus x-default.

    ``path`` may be the page's path in any language; the default-language
    version doubles as x-default.
    """
    links = [
        AlternateLink(
            hreflang=lang.value,
            href=absolute_url(get_alternate_url(path, lang), site_url),
        )
        for lang in SITE.languages
    ]
    links.append(
        AlternateLink(
            hreflang="x-default",
            href=absolute_url(get_alternate_url(path, DEFAULT_LANG), site_url),
        )
    )
    return links


def organization_jsonld(lang: Lang, site_url: str = SITE.url) -> dict:
    """schema.org Organization data for the page head."""
    org = ORGANIZATION
    return {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": SITE.name,
        "url": absolute_url(get_localized_path("/", lang), site_url),
        "logo": {
            "@type": "ImageObject",
            "url": absolute_url(org.logo.path, site_url),
            "width": org.logo.width,
            "height": org.logo.height,
        },
        "description": SEO.default_description[lang],
        "foundingDate": org.founding_date,
        "address": {
            "@type": "PostalAddress",
            "addressLocality": org.address.locality,
            "addressRegion": org.address.region,
            "addressCountry": org.address.country,
        },
        "sameAs": list(org.social_links),
    }


def render_sitemap(paths: Iterable[str], site_url: str = SITE.url) -> str:
    """Render a sitemap listing every page in every language.

    Each ``paths`` entry is a default-language path; its localized
    variants are emitted as separate ``<url>`` entries cross-linked with
    ``xhtml:link`` alternates. Duplicates are dropped, order is kept.
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"'
        ' xmlns:xhtml="http://www.w3.org/1999/xhtml">',
    ]
    for path in dict.fromkeys(paths):
        links = [
            link
            for link in alternate_links(path, site_url)
            if link.hreflang != "x-default"
        ]
        base = get_alternate_url(path, DEFAULT_LANG)
        for lang in SITE.languages:
            loc = absolute_url(get_localized_path(base, lang), site_url)
            parts.append("  <url>")
            parts.append(f"    <loc>{html.escape(loc)}</loc>")
            for link in links:
                parts.append(
                    f'    <xhtml:link rel="alternate" hreflang="{link.hreflang}"'
                    f' href="{html.escape(link.href)}"/>'
                )
            parts.append("  </url>")
    parts.append("</urlset>")
    return "\n".join(parts) + "\n"
