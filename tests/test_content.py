import httpx
import pytest

from cedarsite.config import CMSSettings
from cedarsite.content import (
    LECTURE_FIELDS,
    ContentFetchError,
    ContentStore,
    build_query_params,
)
from cedarsite.i18n import Lang
from cedarsite.models import CMSImage, pick_localized

BASE = {
    "createdAt": "2024-06-01T00:00:00.000Z",
    "updatedAt": "2024-06-02T00:00:00.000Z",
    "publishedAt": "2024-06-01T00:00:00.000Z",
    "revisedAt": "2024-06-02T00:00:00.000Z",
}

LECTURE = {
    "id": "lec1",
    "title": "秋田の未来を語る",
    "title_en": "Talking About Akita's Future",
    "guest_name": "山田太郎",
    "event_date": "2024-07-10T09:00:00.000Z",
    "eyecatch": {"url": "https://images.microcms-assets.io/a.jpg", "width": 1200, "height": 630},
    **BASE,
}


def _list(contents, total=None):
    return {
        "contents": contents,
        "totalCount": len(contents) if total is None else total,
        "offset": 0,
        "limit": 100,
    }


def _store(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ContentStore(CMSSettings(service_domain="cedar", api_key="secret"), client=client)


class TestQueryParams:
    def test_join_and_rename(self):
        params = build_query_params(
            {"fields": ("id", "title"), "limit": 5, "draft_key": "d", "orders": "-event_date"}
        )
        assert params == {"fields": "id,title", "limit": "5", "draftKey": "d", "orders": "-event_date"}

    def test_none_dropped(self):
        assert build_query_params({"filters": None}) == {}
        assert build_query_params(None) == {}

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            build_query_params({"sort": "x"})


class TestContentStore:
    def test_get_lectures_request_and_parse(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json=_list([LECTURE]))

        with _store(handler) as store:
            lectures = store.get_lectures({"orders": "-event_date"})

        request = calls[0]
        assert request.url.host == "cedar.microcms.io"
        assert request.url.path == "/api/v1/lectures"
        assert request.headers["X-MICROCMS-API-KEY"] == "secret"
        assert request.url.params["limit"] == "100"
        assert request.url.params["orders"] == "-event_date"
        assert request.url.params["fields"].split(",") == list(LECTURE_FIELDS)

        [lecture] = lectures
        assert lecture.id == "lec1"
        assert lecture.created_at == BASE["createdAt"]
        assert lecture.eyecatch == CMSImage(
            url="https://images.microcms-assets.io/a.jpg", width=1200, height=630
        )
        assert lecture.belonging is None
        assert lecture.content is None
        assert lecture.localized_title(Lang.EN) == "Talking About Akita's Future"
        assert lecture.localized_guest_name(Lang.EN) == "山田太郎"
        assert lecture.localized_title(Lang.JA) == "秋田の未来を語る"

    def test_query_overrides_defaults(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["limit"] == "3"
            return httpx.Response(200, json=_list([]))

        with _store(handler) as store:
            assert store.get_lectures({"limit": 3}) == []

    def test_get_list_raw(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=_list([{"id": "x"}], total=42))

        with _store(handler) as store:
            page = store.get_list("anything")
        assert page.total_count == 42
        assert page.contents == ({"id": "x"},)

    def test_lecture_detail(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/v1/lectures/lec1"
            return httpx.Response(200, json=LECTURE)

        with _store(handler) as store:
            assert store.get_lecture_detail("lec1").guest_name == "山田太郎"

    def test_members_status_union(self):
        members = [
            {"id": "m1", "name": "A", "position": "代表", "year": "3年", "description": "d", "status": "current", **BASE},
            {"id": "m2", "name": "B", "position": "OB", "year": "2023卒", "description": "d",
             "status": ["current", "graduate"], **BASE},
            {"id": "m3", "name": "C", "position": "-", "year": "-", "description": "d", **BASE},
        ]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=_list(members))

        with _store(handler) as store:
            m1, m2, m3 = store.get_members()
        assert m1.is_current and not m1.is_graduate
        assert m2.is_current and m2.is_graduate
        assert m3.status == () and m3.image is None

    def test_other_collections(self):
        payloads = {
            "/api/v1/upcoming_events": _list(
                [{"id": "e", "title": "交流会", "event_date": "2025-01-01T00:00:00Z",
                  "description": "<p>x</p>", "location_en": "Akita", **BASE}]
            ),
            "/api/v1/media_coverage": _list(
                [{"id": "m", "title": "記事", "media_name": "秋田魁新報",
                  "publish_date": "2024-08-01", "description": "概要", **BASE}]
            ),
            "/api/v1/faqs": _list(
                [{"id": "f", "question": "Q", "answer": "A", "order": "2", **BASE}]
            ),
            "/api/v1/sponsors": _list([{"id": "s", "name": "Acme", **BASE}]),
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payloads[request.url.path])

        with _store(handler) as store:
            [event] = store.get_upcoming_events()
            [media] = store.get_media_coverage()
            [faq] = store.get_faqs()
            [sponsor] = store.get_sponsors()

        assert event.location is None and event.location_en == "Akita"
        assert media.url is None and media.media_name == "秋田魁新報"
        assert faq.order == 2 and faq.category is None
        assert sponsor.logo is None and sponsor.url is None

    def test_pages_object(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/v1/pages"
            return httpx.Response(
                200,
                json={
                    "hero_title": "H",
                    "hero_subtitle": "S",
                    "about_content": "<p>about</p>",
                    "history_content": "<p>history</p>",
                    "sponsors": [{"name": "Acme", "url": "https://acme.example"}],
                },
            )

        with _store(handler) as store:
            pages = store.get_pages()
        assert pages.faqs == ()
        assert pages.sponsors[0].url == "https://acme.example"
        assert pages.sponsors[0].logo is None

    def test_http_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"message": "Unauthorized"})

        with _store(handler) as store, pytest.raises(ContentFetchError, match="401"):
            store.get_members()

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with _store(handler) as store, pytest.raises(ContentFetchError):
            store.get_faqs()

    def test_malformed_record(self):
        broken = {k: v for k, v in LECTURE.items() if k != "guest_name"}

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=_list([broken]))

        with _store(handler) as store, pytest.raises(ContentFetchError, match="malformed"):
            store.get_lectures()

    def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        with _store(handler) as store, pytest.raises(ContentFetchError, match="invalid JSON"):
            store.get_pages()


def test_pick_localized():
    assert pick_localized("日本語", "English", Lang.EN) == "English"
    assert pick_localized("日本語", None, Lang.EN) == "日本語"
    assert pick_localized("日本語", "", Lang.EN) == "日本語"
    assert pick_localized("日本語", "English", Lang.JA) == "日本語"
    assert pick_localized(None, None, Lang.JA) is None
