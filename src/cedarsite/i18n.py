"""Two-language (ja/en) locale resolution, translation, and localized paths."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from urllib.parse import urlsplit

from pytz import timezone, utc

log = logging.getLogger(__name__)


class Lang(str, Enum):
    """Supported site languages. Japanese is the default."""

    JA = "ja"
    EN = "en"


DEFAULT_LANG = Lang.JA

LANGUAGES: dict[Lang, str] = {
    Lang.JA: "日本語",
    Lang.EN: "English",
}

_CODES: frozenset[str] = frozenset(lang.value for lang in Lang)

# Event dates are held in Japan time regardless of where the build runs.
_TOKYO = timezone("Asia/Tokyo")

_EN_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class _MissingTranslation(str):
    """Empty string that marks a key absent from every table."""

    def __new__(cls) -> "_MissingTranslation":
        return super().__new__(cls, "")

    def __repr__(self) -> str:
        return "MISSING_TRANSLATION"


MISSING_TRANSLATION = _MissingTranslation()

_STRINGS: dict[str, dict[str, str]] = {
    # Navigation
    "nav.about": {"ja": "About", "en": "About"},
    "nav.about.us": {"ja": "私たちについて", "en": "About Us"},
    "nav.about.history": {"ja": "設立の経緯", "en": "Our History"},
    "nav.about.members": {"ja": "メンバー紹介", "en": "Members"},
    "nav.events": {"ja": "Events", "en": "Events"},
    "nav.events.upcoming": {"ja": "今後の予定", "en": "Upcoming Events"},
    "nav.events.past": {"ja": "過去の講演会", "en": "Past Lectures"},
    "nav.media": {"ja": "Media", "en": "Media"},
    "nav.faq": {"ja": "FAQ", "en": "FAQ"},
    "nav.sponsors": {"ja": "Sponsors", "en": "Sponsors"},
    "nav.contact": {"ja": "Contact", "en": "Contact"},
    "nav.request": {"ja": "Request", "en": "Request"},
    # Mobile menu
    "menu.title": {"ja": "Menu", "en": "Menu"},
    "menu.about": {"ja": "About", "en": "About"},
    "menu.events": {"ja": "Events", "en": "Events"},
    "menu.more": {"ja": "More", "en": "More"},
    "menu.speakerRequest": {"ja": "講演者リクエスト", "en": "Speaker Request"},
    "menu.speakerRequest.desc": {"ja": "講演者をリクエスト", "en": "Request a speaker"},
    "header.siteName": {"ja": "AIU Cedar Society", "en": "AIU Cedar Society"},
    # Footer
    "footer.title": {"ja": "AIU Cedar Society", "en": "AIU Cedar Society"},
    "footer.description": {
        "ja": "秋田国際教養大学公認団体",
        "en": "Official Student Organization at Akita International University",
    },
    "footer.copyright": {
        "ja": "© 2024 AIU Cedar Society. All rights reserved.",
        "en": "© 2024 AIU Cedar Society. All rights reserved.",
    },
    "footer.instagram": {"ja": "Instagramをフォロー", "en": "Follow us on Instagram"},
    # Shared UI
    "common.backToTop": {"ja": "トップに戻る", "en": "Back to Top"},
    "common.viewAll": {"ja": "すべて見る", "en": "View All"},
    "common.viewDetails": {"ja": "詳しく見る", "en": "View Details"},
    "common.readMore": {"ja": "続きを読む", "en": "Read More"},
    "common.contact": {"ja": "お問い合わせ", "en": "Contact Us"},
    "common.submit": {"ja": "送信する", "en": "Submit"},
    "common.required": {"ja": "必須", "en": "Required"},
    "common.optional": {"ja": "任意", "en": "Optional"},
    # Home
    "home.hero.title1": {
        "ja": "秋田とAIU生の可能性を",
        "en": "Connecting Akita and AIU Students",
    },
    "home.hero.title2": {"ja": "つなぐ", "en": "Possibilities"},
    "home.hero.description": {
        "ja": "AIU Cedar Societyは、学生の熱意と秋田社会の架け橋となります。"
        "「出会い・学び・実践」のサイクルを創り出し、秋田の地で新たな価値を生み出していきます。",
        "en": "AIU Cedar Society bridges student enthusiasm with Akita society. "
        'We create a cycle of "encounter, learn, and practice," generating new value in Akita.',
    },
    "home.upcoming": {"ja": "今後の予定", "en": "Upcoming Events"},
    "home.recentLectures": {"ja": "直近の講演会", "en": "Recent Lectures"},
    "home.viewAllLectures": {"ja": "すべての講演会を見る", "en": "View All Lectures"},
    "home.viewAllEvents": {"ja": "すべての予定を見る", "en": "View All Events"},
    # About / history
    "about.title": {"ja": "私たちについて", "en": "About Us"},
    "about.subtitle": {
        "ja": "AIU Cedar Societyの活動紹介",
        "en": "Learn about AIU Cedar Society activities",
    },
    "history.title": {"ja": "設立の経緯", "en": "Our History"},
    "history.subtitle": {
        "ja": "AIU Cedar Societyがどのように始まったか",
        "en": "How AIU Cedar Society began",
    },
    # Members
    "members.title": {"ja": "メンバー紹介", "en": "Our Members"},
    "members.subtitle": {
        "ja": "AIU Cedar Societyのメンバーを紹介します",
        "en": "Meet the AIU Cedar Society team",
    },
    "members.currentStudents": {"ja": "在校生", "en": "Current Students"},
    "members.graduates": {"ja": "卒業生", "en": "Alumni"},
    # Events
    "events.upcoming.title": {"ja": "今後の予定", "en": "Upcoming Events"},
    "events.upcoming.subtitle": {
        "ja": "開催予定のイベント情報",
        "en": "Information about upcoming events",
    },
    "events.past.title": {"ja": "講演会アーカイブ", "en": "Lecture Archive"},
    "events.past.subtitle": {
        "ja": "過去に開催した講演会の記録",
        "en": "Records of past lectures",
    },
    # FAQ
    "faq.title": {"ja": "よくあるご質問", "en": "Frequently Asked Questions"},
    "faq.subtitle": {
        "ja": "AIU Cedar Societyに関するよくあるご質問をまとめました",
        "en": "Common questions about AIU Cedar Society",
    },
    "faq.notFound.title": {
        "ja": "お探しの質問が見つかりませんか？",
        "en": "Can't find what you're looking for?",
    },
    "faq.notFound.description": {
        "ja": "その他のご質問やご不明な点がございましたら、お気軽にお問い合わせください。",
        "en": "If you have any other questions, please feel free to contact us.",
    },
    # Sponsors / media
    "sponsors.title": {"ja": "協賛企業", "en": "Our Sponsors"},
    "sponsors.subtitle": {
        "ja": "AIU Cedar Societyの活動を支援してくださる企業・団体",
        "en": "Organizations supporting AIU Cedar Society",
    },
    "media.title": {"ja": "メディア掲載", "en": "Media Coverage"},
    "media.subtitle": {
        "ja": "AIU Cedar Societyのメディア掲載情報",
        "en": "AIU Cedar Society in the news",
    },
    # Contact
    "contact.title": {"ja": "お問い合わせ", "en": "Contact Us"},
    "contact.subtitle": {
        "ja": "ご質問やご意見がございましたら、お気軽にお問い合わせください",
        "en": "Feel free to reach out with any questions or feedback",
    },
    "contact.form.name": {"ja": "お名前", "en": "Name"},
    "contact.form.email": {"ja": "メールアドレス", "en": "Email"},
    "contact.form.subject": {"ja": "件名", "en": "Subject"},
    "contact.form.message": {"ja": "メッセージ", "en": "Message"},
    "contact.form.submit": {"ja": "送信する", "en": "Submit"},
    # Speaker request
    "speakerRequest.title": {"ja": "講演者リクエスト", "en": "Speaker Request"},
    "speakerRequest.subtitle": {
        "ja": "講演会に呼んでほしい方をリクエストできます",
        "en": "Request a speaker for our lecture series",
    },
    "speakerRequest.form.speaker": {"ja": "希望する講演者", "en": "Requested Speaker"},
    "speakerRequest.form.reason": {"ja": "理由・背景", "en": "Reason"},
    "speakerRequest.form.topic": {"ja": "講演テーマ", "en": "Suggested Topic"},
    "speakerRequest.form.other": {"ja": "その他", "en": "Other Comments"},
}


@dataclass(frozen=True)
class TranslationTable:
    """Read-only per-language string tables.

    ``strings[lang]`` maps symbolic keys to display text. Built once and
    handed to whatever needs localized text.
    """

    strings: Mapping[Lang, Mapping[str, str]]

    def lookup(self, lang: Lang, key: str) -> str | None:
        return self.strings.get(lang, {}).get(key)

    def keys(self, lang: Lang = DEFAULT_LANG) -> frozenset[str]:
        return frozenset(self.strings.get(lang, {}))


def build_translation_table(
    strings: Mapping[str, Mapping[str, str]] | None = None,
) -> TranslationTable:
    """Pivot a key → {lang: text} mapping into a TranslationTable.

    Args:
        strings: Source entries. Defaults to the site's built-in UI strings.
            Unknown language codes inside an entry are ignored.

    Returns:
        Immutable TranslationTable.
    """
    source = _STRINGS if strings is None else strings
    per_lang: dict[Lang, dict[str, str]] = {lang: {} for lang in Lang}
    for key, entry in source.items():
        for code, text in entry.items():
            if code in _CODES:
                per_lang[Lang(code)][key] = text

    extra = set().union(*per_lang.values()) - set(per_lang[DEFAULT_LANG])
    if extra:
        log.warning("Keys without a default-language entry: %s", sorted(extra))

    return TranslationTable(
        strings=MappingProxyType(
            {lang: MappingProxyType(texts) for lang, texts in per_lang.items()}
        )
    )


def get_lang_from_path(path: str) -> Lang:
    """Return the language named by the first path component, else the default.

    Matching is exact: no case folding or trimming.
    """
    segments = path.split("/")
    if len(segments) > 1 and segments[1] in _CODES:
        return Lang(segments[1])
    return DEFAULT_LANG


def get_lang_from_url(url: str) -> Lang:
    """Same as get_lang_from_path, for an absolute or relative URL."""
    return get_lang_from_path(urlsplit(url).path)


def translate(table: TranslationTable, lang: Lang, key: str) -> str:
    """Return the text for key in lang, falling back to the default language.

    A key missing from both tables yields MISSING_TRANSLATION and a
    logged warning; there is no further fallback.
    """
    text = table.lookup(lang, key) or table.lookup(DEFAULT_LANG, key)
    if text:
        return text
    log.warning("Missing translation for key %r (lang=%s)", key, Lang(lang).value)
    return MISSING_TRANSLATION


def use_translations(table: TranslationTable, lang: Lang) -> Callable[[str], str]:
    """Bind table and lang, returning a one-argument t(key) lookup."""

    def t(key: str) -> str:
        return translate(table, lang, key)

    return t


def get_alternate_lang(current: Lang) -> Lang:
    return Lang.EN if current == Lang.JA else Lang.JA


def get_language_name(lang: Lang) -> str:
    return LANGUAGES[Lang(lang)]


def _normalize(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def get_alternate_url(path: str, target: Lang) -> str:
    """Return the same page's path in the target language.

    Any ``/en`` prefix is stripped before the target's prefix (if any) is
    added, so ``/`` maps to ``/`` or ``/en`` and never ``/en/``.
    """
    pathname = _normalize(path)
    if get_lang_from_path(pathname) == Lang.EN:
        pathname = pathname[len("/en") :] or "/"

    if target != DEFAULT_LANG:
        pathname = f"/{Lang(target).value}" + ("" if pathname == "/" else pathname)

    return pathname


def get_localized_path(path: str, lang: Lang) -> str:
    """Prefix a site path with the language segment when lang is not the default."""
    normalized = _normalize(path)
    if lang == DEFAULT_LANG:
        return normalized
    return f"/{Lang(lang).value}" + ("" if normalized == "/" else normalized)


def _to_tokyo(value: datetime | str) -> datetime:
    """Parse an ISO-8601 string if needed and convert to Japan time.

    Naive datetimes are taken as UTC (microCMS timestamps always are).
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = utc.localize(value)
    return value.astimezone(_TOKYO)


def format_date(value: datetime | str, lang: Lang) -> str:
    """Format a date as ``January 15, 2024`` (en) or ``2024年1月15日`` (ja)."""
    d = _to_tokyo(value)
    if lang == Lang.EN:
        return f"{_EN_MONTHS[d.month - 1]} {d.day}, {d.year}"
    return f"{d.year}年{d.month}月{d.day}日"


def format_datetime(value: datetime | str, lang: Lang) -> str:
    """Format a date with a two-digit hour:minute in Japan time.

    en: ``January 15, 2024 at 07:00 PM`` (12-hour clock).
    ja: ``2024年1月15日 19:00`` (24-hour clock).
    """
    d = _to_tokyo(value)
    if lang == Lang.EN:
        hour = d.hour % 12 or 12
        meridiem = "AM" if d.hour < 12 else "PM"
        return f"{format_date(d, lang)} at {hour:02d}:{d.minute:02d} {meridiem}"
    return f"{format_date(d, lang)} {d.hour:02d}:{d.minute:02d}"
