"""
Metadata about every charset a prober in this package can report.
"""

from __future__ import annotations

from dataclasses import dataclass

from charprobe.enums import LanguageFilter


@dataclass(frozen=True)
class Charset:
    """Metadata about a charset reported by a prober.

    ``python_codec`` is the name to hand to :func:`codecs.lookup`, or
    ``None`` when the standard library ships no codec for the charset.
    """

    name: str
    is_multi_byte: bool
    language_filter: LanguageFilter
    python_codec: str | None


def _single(name: str, codec: str) -> Charset:
    return Charset(
        name=name,
        is_multi_byte=False,
        language_filter=LanguageFilter.NON_CJK,
        python_codec=codec,
    )


def _multi(name: str, lang_filter: LanguageFilter, codec: str | None) -> Charset:
    return Charset(
        name=name,
        is_multi_byte=True,
        language_filter=lang_filter,
        python_codec=codec,
    )


_ALL_LANGUAGES = LanguageFilter.ALL

CHARSETS: dict[str, Charset] = {
    charset.name.upper(): charset
    for charset in (
        _single("ascii", "ascii"),
        # Unicode
        _multi("utf-8", _ALL_LANGUAGES, "utf-8"),
        _multi("UTF-16", _ALL_LANGUAGES, "utf-16"),
        _multi("UTF-16BE", _ALL_LANGUAGES, "utf-16-be"),
        _multi("UTF-16LE", _ALL_LANGUAGES, "utf-16-le"),
        _multi("UTF-32", _ALL_LANGUAGES, "utf-32"),
        _multi("UTF-32BE", _ALL_LANGUAGES, "utf-32-be"),
        _multi("UTF-32LE", _ALL_LANGUAGES, "utf-32-le"),
        # Escape-sequence encodings
        _multi("HZ-GB-2312", LanguageFilter.CHINESE_SIMPLIFIED, "hz"),
        _multi("ISO-2022-CN", LanguageFilter.CHINESE_SIMPLIFIED, None),
        _multi("ISO-2022-JP", LanguageFilter.JAPANESE, "iso2022_jp_2"),
        _multi("ISO-2022-KR", LanguageFilter.KOREAN, "iso2022_kr"),
        # CJK multi-byte
        _multi("SHIFT_JIS", LanguageFilter.JAPANESE, "cp932"),
        _multi("EUC-JP", LanguageFilter.JAPANESE, "euc_jp"),
        _multi("EUC-KR", LanguageFilter.KOREAN, "euc_kr"),
        _multi("CP949", LanguageFilter.KOREAN, "cp949"),
        _multi("GB18030", LanguageFilter.CHINESE_SIMPLIFIED, "gb18030"),
        _multi("Big5", LanguageFilter.CHINESE_TRADITIONAL, "big5"),
        _multi("EUC-TW", LanguageFilter.CHINESE_TRADITIONAL, None),
        # Single-byte
        _single("IBM852", "cp852"),
        _single("IBM855", "cp855"),
        _single("IBM866", "cp866"),
        _single("ISO-8859-1", "iso8859_1"),
        _single("ISO-8859-2", "iso8859_2"),
        _single("ISO-8859-3", "iso8859_3"),
        _single("ISO-8859-4", "iso8859_4"),
        _single("ISO-8859-5", "iso8859_5"),
        _single("ISO-8859-6", "iso8859_6"),
        _single("ISO-8859-7", "iso8859_7"),
        _single("ISO-8859-8", "iso8859_8"),
        _single("ISO-8859-9", "iso8859_9"),
        _single("ISO-8859-10", "iso8859_10"),
        _single("ISO-8859-11", "iso8859_11"),
        _single("ISO-8859-13", "iso8859_13"),
        _single("ISO-8859-15", "iso8859_15"),
        _single("ISO-8859-16", "iso8859_16"),
        _single("KOI8-R", "koi8_r"),
        _single("KOI8-U", "koi8_u"),
        _single("MacCentralEurope", "mac_latin2"),
        _single("MacCyrillic", "mac_cyrillic"),
        _single("TIS-620", "tis_620"),
        _single("Windows-1250", "cp1250"),
        _single("Windows-1251", "cp1251"),
        _single("Windows-1252", "cp1252"),
        _single("Windows-1253", "cp1253"),
        _single("Windows-1254", "cp1254"),
        _single("Windows-1255", "cp1255"),
        _single("Windows-1256", "cp1256"),
        _single("Windows-1257", "cp1257"),
        _single("Windows-1258", "cp1258"),
    )
}


def get_charset(name: str) -> Charset:
    """Return the :class:`Charset` registered under *name* (case-insensitive).

    :raises KeyError: If no charset of that name is known.
    """
    return CHARSETS[name.upper()]
