"""Read-only microCMS client — typed fetches for lectures, members, events and more."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from cedarsite.config import CMSSettings
from cedarsite.models import (
    FAQ,
    CMSImage,
    FAQItem,
    Lecture,
    ListResponse,
    MediaCoverage,
    Member,
    Pages,
    Sponsor,
    SponsorItem,
    UpcomingEvent,
)

log = logging.getLogger(__name__)

_BASE_FIELDS = ("id", "createdAt", "updatedAt", "publishedAt", "revisedAt")

# Field selections per collection. Keeps payloads to what the pages render.
LECTURE_FIELDS: tuple[str, ...] = (
    "title",
    "title_en",
    "guest_name",
    "guest_name_en",
    "belonging",
    "belonging_en",
    "event_date",
    "eyecatch",
    "content",
) + _BASE_FIELDS
MEMBER_FIELDS: tuple[str, ...] = (
    "name",
    "name_en",
    "position",
    "position_en",
    "year",
    "year_en",
    "description",
    "description_en",
    "status",
    "image",
) + _BASE_FIELDS
UPCOMING_EVENT_FIELDS: tuple[str, ...] = (
    "title",
    "title_en",
    "event_date",
    "description",
    "description_en",
    "location",
    "location_en",
) + _BASE_FIELDS
MEDIA_COVERAGE_FIELDS: tuple[str, ...] = (
    "title",
    "media_name",
    "publish_date",
    "url",
    "description",
) + _BASE_FIELDS

DEFAULT_LIMIT = 100

_QUERY_KEYS = {
    "fields": "fields",
    "limit": "limit",
    "offset": "offset",
    "filters": "filters",
    "orders": "orders",
    "q": "q",
    "depth": "depth",
    "ids": "ids",
    "draft_key": "draftKey",
}


class ContentFetchError(Exception):
    """microCMS request failure or unusable response."""


def build_query_params(queries: Mapping[str, Any] | None) -> dict[str, str]:
    """Translate query options into microCMS URL parameters.

    List-valued ``fields``/``ids`` are comma-joined; ``None`` values are dropped.

    Raises:
        ValueError: On an unknown query option.
    """
    params: dict[str, str] = {}
    for key, value in (queries or {}).items():
        if value is None:
            continue
        if key not in _QUERY_KEYS:
            raise ValueError(f"Unknown microCMS query option: {key}")
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        params[_QUERY_KEYS[key]] = str(value)
    return params


def _image(raw: Any) -> CMSImage | None:
    if not raw:
        return None
    return CMSImage(url=raw["url"], width=int(raw["width"]), height=int(raw["height"]))


def _base(raw: Mapping[str, Any]) -> dict[str, str]:
    return {
        "id": raw["id"],
        "created_at": raw["createdAt"],
        "updated_at": raw["updatedAt"],
        "published_at": raw["publishedAt"],
        "revised_at": raw["revisedAt"],
    }


def _status(raw: Any) -> tuple[str, ...]:
    """Member status is a single value or a list of values in the CMS."""
    if not raw:
        return ()
    values = raw if isinstance(raw, list) else [raw]
    return tuple(v for v in values if v in ("current", "graduate"))


def parse_lecture(raw: Mapping[str, Any]) -> Lecture:
    return Lecture(
        **_base(raw),
        title=raw["title"],
        guest_name=raw["guest_name"],
        event_date=raw["event_date"],
        title_en=raw.get("title_en"),
        guest_name_en=raw.get("guest_name_en"),
        belonging=raw.get("belonging"),
        belonging_en=raw.get("belonging_en"),
        eyecatch=_image(raw.get("eyecatch")),
        content=raw.get("content"),
    )


def parse_member(raw: Mapping[str, Any]) -> Member:
    return Member(
        **_base(raw),
        name=raw["name"],
        position=raw["position"],
        year=raw["year"],
        description=raw["description"],
        name_en=raw.get("name_en"),
        position_en=raw.get("position_en"),
        year_en=raw.get("year_en"),
        description_en=raw.get("description_en"),
        status=_status(raw.get("status")),  # type: ignore[arg-type]
        image=_image(raw.get("image")),
    )


def parse_upcoming_event(raw: Mapping[str, Any]) -> UpcomingEvent:
    return UpcomingEvent(
        **_base(raw),
        title=raw["title"],
        event_date=raw["event_date"],
        description=raw["description"],
        title_en=raw.get("title_en"),
        description_en=raw.get("description_en"),
        location=raw.get("location"),
        location_en=raw.get("location_en"),
    )


def parse_media_coverage(raw: Mapping[str, Any]) -> MediaCoverage:
    return MediaCoverage(
        **_base(raw),
        title=raw["title"],
        media_name=raw["media_name"],
        publish_date=raw["publish_date"],
        description=raw["description"],
        url=raw.get("url"),
    )


def parse_faq(raw: Mapping[str, Any]) -> FAQ:
    order = raw.get("order")
    return FAQ(
        **_base(raw),
        question=raw["question"],
        answer=raw["answer"],
        category=raw.get("category"),
        order=int(order) if order is not None else None,
    )


def parse_sponsor(raw: Mapping[str, Any]) -> Sponsor:
    return Sponsor(
        **_base(raw),
        name=raw["name"],
        logo=_image(raw.get("logo")),
        url=raw.get("url"),
        description=raw.get("description"),
    )


def parse_pages(raw: Mapping[str, Any]) -> Pages:
    return Pages(
        hero_title=raw["hero_title"],
        hero_subtitle=raw["hero_subtitle"],
        about_content=raw["about_content"],
        history_content=raw["history_content"],
        faqs=tuple(
            FAQItem(question=f["question"], answer=f["answer"])
            for f in raw.get("faqs") or ()
        ),
        sponsors=tuple(
            SponsorItem(
                name=s["name"],
                logo=_image(s.get("logo")),
                url=s.get("url"),
                description=s.get("description"),
            )
            for s in raw.get("sponsors") or ()
        ),
    )


class ContentStore:
    """Thin synchronous wrapper over the microCMS content API.

    No caching and no retries: every call is one GET, and any failure is
    raised as ContentFetchError.
    """

    def __init__(
        self,
        settings: CMSSettings,
        client: httpx.Client | None = None,
        timeout: float = 10,
    ) -> None:
        self.base_url = f"https://{settings.service_domain}.microcms.io/api/v1/"
        self.client = client or httpx.Client(timeout=timeout)
        self._headers = {"X-MICROCMS-API-KEY": settings.api_key}

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ContentStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, path: str, queries: Mapping[str, Any] | None) -> dict:
        url = self.base_url + path
        params = build_query_params(queries)
        log.debug("GET %s params=%s", url, params)
        try:
            resp = self.client.get(url, params=params, headers=self._headers)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            raise ContentFetchError(
                f"microCMS {path}: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ContentFetchError(f"microCMS {path}: {e}") from e
        except ValueError as e:
            raise ContentFetchError(f"microCMS {path}: invalid JSON") from e
        if not isinstance(data, dict):
            raise ContentFetchError(f"microCMS {path}: unexpected payload")
        return data

    def get_list(
        self, endpoint: str, queries: Mapping[str, Any] | None = None
    ) -> ListResponse:
        """Fetch one page of a list endpoint."""
        data = self._get(endpoint, queries)
        try:
            return ListResponse(
                total_count=int(data["totalCount"]),
                offset=int(data["offset"]),
                limit=int(data["limit"]),
                contents=tuple(data["contents"]),
            )
        except (KeyError, TypeError) as e:
            raise ContentFetchError(f"microCMS {endpoint}: malformed list response") from e

    def get_list_detail(
        self,
        endpoint: str,
        content_id: str,
        queries: Mapping[str, Any] | None = None,
    ) -> dict:
        """Fetch a single record of a list endpoint by content ID."""
        return self._get(f"{endpoint}/{content_id}", queries)

    def get_object(
        self, endpoint: str, queries: Mapping[str, Any] | None = None
    ) -> dict:
        """Fetch an object (singleton) endpoint."""
        return self._get(endpoint, queries)

    def _collection(
        self,
        endpoint: str,
        fields: Iterable[str] | None,
        queries: Mapping[str, Any] | None,
    ) -> tuple[dict, ...]:
        merged: dict[str, Any] = {"limit": DEFAULT_LIMIT}
        if fields is not None:
            merged["fields"] = tuple(fields)
        merged.update(queries or {})
        return self.get_list(endpoint, merged).contents

    def _parse_all(self, endpoint: str, parser, rows: Iterable[Mapping[str, Any]]) -> list:
        try:
            return [parser(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise ContentFetchError(f"microCMS {endpoint}: malformed record ({e})") from e

    def get_lectures(self, queries: Mapping[str, Any] | None = None) -> list[Lecture]:
        rows = self._collection("lectures", LECTURE_FIELDS, queries)
        return self._parse_all("lectures", parse_lecture, rows)

    def get_lecture_detail(
        self, content_id: str, queries: Mapping[str, Any] | None = None
    ) -> Lecture:
        raw = self.get_list_detail("lectures", content_id, queries)
        return self._parse_all("lectures", parse_lecture, [raw])[0]

    def get_members(self, queries: Mapping[str, Any] | None = None) -> list[Member]:
        rows = self._collection("members", MEMBER_FIELDS, queries)
        return self._parse_all("members", parse_member, rows)

    def get_upcoming_events(
        self, queries: Mapping[str, Any] | None = None
    ) -> list[UpcomingEvent]:
        rows = self._collection("upcoming_events", UPCOMING_EVENT_FIELDS, queries)
        return self._parse_all("upcoming_events", parse_upcoming_event, rows)

    def get_media_coverage(
        self, queries: Mapping[str, Any] | None = None
    ) -> list[MediaCoverage]:
        rows = self._collection("media_coverage", MEDIA_COVERAGE_FIELDS, queries)
        return self._parse_all("media_coverage", parse_media_coverage, rows)

    def get_faqs(self, queries: Mapping[str, Any] | None = None) -> list[FAQ]:
        rows = self._collection("faqs", None, queries)
        return self._parse_all("faqs", parse_faq, rows)

    def get_sponsors(self, queries: Mapping[str, Any] | None = None) -> list[Sponsor]:
        rows = self._collection("sponsors", None, queries)
        return self._parse_all("sponsors", parse_sponsor, rows)

    def get_pages(self) -> Pages:
        raw = self.get_object("pages")
        return self._parse_all("pages", parse_pages, [raw])[0]
