"""Content records fetched from microCMS. Read-only, one dataclass per endpoint."""

from dataclasses import dataclass
from typing import Literal

from cedarsite.i18n import Lang

MemberStatus = Literal["current", "graduate"]


def pick_localized(ja_value: str | None, en_value: str | None, lang: Lang) -> str | None:
    """Return the English variant for en pages when it exists, else the Japanese one."""
    if lang == Lang.EN and en_value:
        return en_value
    return ja_value


@dataclass(frozen=True)
class CMSImage:
    """Image descriptor as served by the microCMS asset CDN."""

    url: str
    width: int
    height: int


@dataclass(frozen=True)
class Lecture:
    """A past or scheduled lecture with a guest speaker."""

    id: str
    title: str
    guest_name: str
    event_date: str  # ISO 8601
    created_at: str
    updated_at: str
    published_at: str
    revised_at: str
    title_en: str | None = None
    guest_name_en: str | None = None
    belonging: str | None = None  # Speaker affiliation
    belonging_en: str | None = None
    eyecatch: CMSImage | None = None
    content: str | None = None  # HTML body

    def localized_title(self, lang: Lang) -> str:
        return pick_localized(self.title, self.title_en, lang) or self.title

    def localized_guest_name(self, lang: Lang) -> str:
        return pick_localized(self.guest_name, self.guest_name_en, lang) or self.guest_name

    def localized_belonging(self, lang: Lang) -> str | None:
        return pick_localized(self.belonging, self.belonging_en, lang)


@dataclass(frozen=True)
class Member:
    """Organization member profile. status may hold both values."""

    id: str
    name: str
    position: str
    year: str  # School year or graduation year, free text
    description: str
    created_at: str
    updated_at: str
    published_at: str
    revised_at: str
    name_en: str | None = None
    position_en: str | None = None
    year_en: str | None = None
    description_en: str | None = None
    status: tuple[MemberStatus, ...] = ()
    image: CMSImage | None = None

    @property
    def is_current(self) -> bool:
        return "current" in self.status

    @property
    def is_graduate(self) -> bool:
        return "graduate" in self.status


@dataclass(frozen=True)
class UpcomingEvent:
    id: str
    title: str
    event_date: str  # ISO 8601
    description: str  # May contain HTML
    created_at: str
    updated_at: str
    published_at: str
    revised_at: str
    title_en: str | None = None
    description_en: str | None = None
    location: str | None = None
    location_en: str | None = None


@dataclass(frozen=True)
class MediaCoverage:
    id: str
    title: str
    media_name: str  # Outlet name, e.g. "秋田魁新報"
    publish_date: str  # ISO 8601
    description: str
    created_at: str
    updated_at: str
    published_at: str
    revised_at: str
    url: str | None = None  # External article link


@dataclass(frozen=True)
class FAQ:
    id: str
    question: str
    answer: str
    created_at: str
    updated_at: str
    published_at: str
    revised_at: str
    category: str | None = None
    order: int | None = None


@dataclass(frozen=True)
class Sponsor:
    id: str
    name: str
    created_at: str
    updated_at: str
    published_at: str
    revised_at: str
    logo: CMSImage | None = None
    url: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class FAQItem:
    """FAQ entry embedded in the pages singleton (no base fields)."""

    question: str
    answer: str


@dataclass(frozen=True)
class SponsorItem:
    """Sponsor entry embedded in the pages singleton (no base fields)."""

    name: str
    logo: CMSImage | None = None
    url: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Pages:
    """Site-wide page copy, stored as a microCMS object (singleton) endpoint."""

    hero_title: str
    hero_subtitle: str
    about_content: str
    history_content: str
    faqs: tuple[FAQItem, ...] = ()
    sponsors: tuple[SponsorItem, ...] = ()


@dataclass(frozen=True)
class ListResponse:
    """One page of a microCMS list endpoint. contents are raw field dicts."""

    total_count: int
    offset: int
    limit: int
    contents: tuple[dict, ...]
