"""Site-wide settings: identity, SEO defaults, organization data, CMS credentials."""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from cedarsite.i18n import DEFAULT_LANG, Lang

log = logging.getLogger(__name__)

# Placeholder used when credentials are absent so builds without CMS access still run.
_DUMMY = "dummy"


@dataclass(frozen=True)
class SiteConfig:
    name: str
    url: str  # Production origin, no trailing slash
    default_lang: Lang
    languages: tuple[Lang, ...]


@dataclass(frozen=True)
class SeoConfig:
    default_title: dict[Lang, str]
    title_template: str  # "%s" is replaced by the page title
    default_description: dict[Lang, str]
    default_keywords: dict[Lang, str]
    default_og_image: str


@dataclass(frozen=True)
class Address:
    locality: str
    region: str
    country: str
    geo_region: str  # ISO 3166-2


@dataclass(frozen=True)
class Logo:
    path: str
    width: int
    height: int


@dataclass(frozen=True)
class OrganizationConfig:
    """Data for the schema.org Organization block."""

    founding_date: str  # YYYY-MM
    address: Address
    logo: Logo
    social_links: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CMSSettings:
    service_domain: str
    api_key: str

    @property
    def is_dummy(self) -> bool:
        return self.service_domain == _DUMMY or self.api_key == _DUMMY


SITE = SiteConfig(
    name="AIU Cedar Society",
    url="https://aiu-cedar-society.com",
    default_lang=DEFAULT_LANG,
    languages=(Lang.JA, Lang.EN),
)

SEO = SeoConfig(
    default_title={
        Lang.JA: "AIU Cedar Society - 秋田とAIU生の可能性をつなぐ",
        Lang.EN: "AIU Cedar Society - Connecting Akita with AIU Students",
    },
    title_template="%s | AIU Cedar Society",
    default_description={
        Lang.JA: (
            "AIU Cedar Societyは秋田国際教養大学の学生主導の公認団体です。"
            "著名なゲストを招いた講演会などを通じて、学生と秋田社会をつなぎ、"
            "「出会い・学び・実践」のサイクルを創り出します。"
        ),
        Lang.EN: (
            "AIU Cedar Society is a student-led organization at Akita International "
            "University. Through lectures with distinguished guests, we connect students "
            "with Akita society, creating a cycle of 'encounter, learning, and practice'."
        ),
    },
    default_keywords={
        Lang.JA: "AIU Cedar Society,秋田国際教養大学,AIU,学生団体,講演会,秋田,イベント,"
        "キャリア支援,起業家,地域活性化",
        Lang.EN: "AIU Cedar Society,Akita International University,AIU,student organization,"
        "lectures,Akita,events,career support,entrepreneurs,regional revitalization",
    },
    default_og_image="/ogp-default.jpg",
)

ORGANIZATION = OrganizationConfig(
    founding_date="2024-06",
    address=Address(
        locality="秋田市",
        region="秋田県",
        country="JP",
        geo_region="JP-05",
    ),
    logo=Logo(path="/android-chrome-512x512.png", width=512, height=512),
    social_links=("https://www.instagram.com/aiucedarsociety",),
)


def load_cms_settings() -> CMSSettings:
    """Read microCMS credentials from the environment (and a .env file if present).

    Missing values fall back to a dummy placeholder with a warning, so
    pages that do not depend on CMS data can still be built.
    """
    load_dotenv()
    service_domain = os.environ.get("MICROCMS_SERVICE_DOMAIN") or _DUMMY
    api_key = os.environ.get("MICROCMS_API_KEY") or _DUMMY
    settings = CMSSettings(service_domain=service_domain, api_key=api_key)
    if settings.is_dummy:
        log.warning(
            "MICROCMS_SERVICE_DOMAIN / MICROCMS_API_KEY not set; using dummy credentials"
        )
    return settings
