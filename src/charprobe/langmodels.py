"""
Language models for the single-byte probers.

A model pairs a language's alphabet with one code page.  The byte category
table is derived from the code page's mapping in the Python codec, so every
model shares a single definition of its alphabet no matter how many code
pages the language is commonly written in.
"""

from __future__ import annotations

import functools
import unicodedata
from dataclasses import dataclass

from charprobe.enums import CharacterCategory

#: Shares of an alphabet, taken in descending frequency order, that count
#: as "frequent" and as "common" letters.
FREQUENT_SHARE = 0.35
COMMON_SHARE = 0.75


@dataclass(frozen=True)
class LanguageModel:
    """An alphabet written in a particular single-byte code page.

    ``alphabet`` lists the lowercase letters of the language in descending
    order of frequency.  Caseless scripts list their letters as they are.
    """

    charset_name: str
    language: str
    codec: str
    alphabet: str

    @property
    def frequent_count(self) -> int:
        return int(len(self.alphabet) * FREQUENT_SHARE)

    @property
    def common_count(self) -> int:
        return int(len(self.alphabet) * COMMON_SHARE)

    @property
    def char_to_category(self) -> tuple[int, ...]:
        return _category_tables(self.codec, self.alphabet)[0]

    @property
    def is_upper(self) -> tuple[bool, ...]:
        return _category_tables(self.codec, self.alphabet)[1]


def _categorize(char: str, letter_index: dict[str, int]) -> tuple[int, bool]:
    category = unicodedata.category(char)
    if category == "Cc":
        return CharacterCategory.CONTROL, False
    if category in ("Mn", "Mc"):
        return CharacterCategory.TRANSPARENT, False
    lower = char.lower()[0]
    if lower in letter_index:
        return letter_index[lower], lower != char
    if char.isascii() and char.isalpha():
        return CharacterCategory.ASCII_LETTER, False
    if category.startswith("L"):
        return CharacterCategory.FOREIGN, False
    if category[0] in "PZ" or category == "Nd" or char.isascii():
        return CharacterCategory.MARKER, False
    return CharacterCategory.SYMBOL, False


@functools.lru_cache(maxsize=None)
def _category_tables(
    codec: str, alphabet: str
) -> tuple[tuple[int, ...], tuple[bool, ...]]:
    """Return ``(char_to_category, is_upper)`` for every byte value."""
    letter_index: dict[str, int] = {}
    for letter in alphabet:
        letter_index.setdefault(letter, len(letter_index))

    categories = []
    upper = []
    for byte in range(256):
        try:
            char = bytes([byte]).decode(codec)
        except UnicodeDecodeError:
            categories.append(int(CharacterCategory.UNDEFINED))
            upper.append(False)
            continue
        category, is_upper = _categorize(char, letter_index)
        categories.append(int(category))
        upper.append(is_upper)
    return tuple(categories), tuple(upper)


# Alphabets, most frequent letters first.

RUSSIAN = "оеаинтсрвлкмдпуяыьгзбчйхжшюцщэфъё"
UKRAINIAN = "оанвиітерсклудмпязьбгчйхжцшюєїщфґ"
BULGARIAN = "аоеинтрсвлкдпмъзягубчцйжшхщюьф"
GREEK = "αοιετσνηυρπκμλςάέίόδγήχύθώφβξζψϊϋΐΰ"
HEBREW = "יוהלארמתבשנדעכםקפחןצגסזטךףץ"
ARABIC = "اليمونرتبعدةسفهكقأحجىشطصخثزضإغذظءئآؤ"
THAI = "านรอกเงมยลวดทสตะไบคหพแขปจใชำโถศผณธภษซญฟฉฐฒฝฎฏฑฬฮฤฆฦฃฅๅฌฯๆ"
TURKISH = "aeinrlıkdmuytsbozüşgçğcvhpöfjqwx"
FRENCH = "esaitnrulodcpmévqfbghjàxèyêzçôùâûîœëïüÿækw"
GERMAN = "enisratdhulcgmobwfkzpvüäößjyxq"
SPANISH = "eaosrnidlctumpbgvyqóíhfzjéáñxúüwk"
PORTUGUESE = "aeosrinmdtculpvgãqçbféhzáxjêóíúõâôàwky"
ITALIAN = "eaionlrtscdupmvghfbqzòàùìéèóywkjx"
DANISH = "erntisdlagokmvfubpæhøjyåcwzxq"
SWEDISH = "eanrtsildomkgvähfupåöbcjyxwzq"
CZECH = "oeantvislkrdpímuzjyěcbéhřáýčšůžfgúňxťóďwq"
POLISH = "aioezwnrcsyktdpmulłjbgęhąóżśćfńźvxq"
HUNGARIAN = "eatlnskomzrigáéydbvhjfuöpóőcüúíűxwq"
LITHUANIAN = "iasoetnurklmdvjpgyėšbųžzčįūcęąhfx"
ESTONIAN = "aeistludkmnrvohjpgäõüböfzšžcwxyq"
ESPERANTO = "aieonlsrtkjmudpvgbfĉcĝŝzŭĥĵh"
CROATIAN = "aioenjstrkuvlmpdzgbcčšžhćfđ"
SLOVAK = "oaeinvrtslkdmpuzjyhcbáíéýčžšľťúôäňgfóďĺŕxwq"
SLOVENE = "eaionrlsjvtkdpmzbucgšhčžf"
ROMANIAN = "eiartnulcosdpmăfvîbgșşțţzhâjkxyw"
LATVIAN = "aistenrumkoldjvpāīēzšbgūcļņģķžčhf"
IRISH = "aihnrsetcldoguámbífóéúpvw"
FINNISH = "aitnesloukämvrjhypdöbgcfwzqxå"
MALTESE = "aieltnrmkusdjbogħfżċvzġhwxpqàèìòù"
VIETNAMESE = "nhtcaigouđmlyvrkêưsôơbpdăâxeqàáéíóúùè"

_WESTERN_CODE_PAGES = (
    ("Windows-1252", "cp1252"),
    ("ISO-8859-1", "iso8859_1"),
    ("ISO-8859-15", "iso8859_15"),
)

#: Hebrew is scored once, in its logical order; the Hebrew prober decides
#: between the logical and visual charsets from where final letters fall.
HEBREW_MODEL = LanguageModel(
    charset_name="Windows-1255", language="Hebrew", codec="cp1255", alphabet=HEBREW
)


def _models(
    language: str, alphabet: str, *code_pages: tuple[str, str]
) -> list[LanguageModel]:
    return [
        LanguageModel(
            charset_name=charset_name,
            language=language,
            codec=codec,
            alphabet=alphabet,
        )
        for charset_name, codec in code_pages
    ]


LANGUAGE_MODELS: tuple[LanguageModel, ...] = (
    *_models(
        "Russian",
        RUSSIAN,
        ("Windows-1251", "cp1251"),
        ("KOI8-R", "koi8_r"),
        ("ISO-8859-5", "iso8859_5"),
        ("MacCyrillic", "mac_cyrillic"),
        ("IBM866", "cp866"),
        ("IBM855", "cp855"),
    ),
    *_models(
        "Ukrainian", UKRAINIAN, ("KOI8-U", "koi8_u"), ("Windows-1251", "cp1251")
    ),
    *_models(
        "Bulgarian",
        BULGARIAN,
        ("Windows-1251", "cp1251"),
        ("ISO-8859-5", "iso8859_5"),
    ),
    *_models(
        "Greek", GREEK, ("ISO-8859-7", "iso8859_7"), ("Windows-1253", "cp1253")
    ),
    *_models(
        "Arabic", ARABIC, ("Windows-1256", "cp1256"), ("ISO-8859-6", "iso8859_6")
    ),
    *_models("Thai", THAI, ("TIS-620", "tis_620"), ("ISO-8859-11", "iso8859_11")),
    *_models(
        "Turkish", TURKISH, ("ISO-8859-9", "iso8859_9"), ("Windows-1254", "cp1254")
    ),
    *_models("French", FRENCH, *_WESTERN_CODE_PAGES),
    *_models("German", GERMAN, *_WESTERN_CODE_PAGES),
    *_models("Spanish", SPANISH, *_WESTERN_CODE_PAGES),
    *_models("Portuguese", PORTUGUESE, *_WESTERN_CODE_PAGES),
    *_models("Italian", ITALIAN, *_WESTERN_CODE_PAGES),
    *_models("Danish", DANISH, *_WESTERN_CODE_PAGES),
    *_models("Swedish", SWEDISH, *_WESTERN_CODE_PAGES),
    *_models(
        "Czech",
        CZECH,
        ("Windows-1250", "cp1250"),
        ("ISO-8859-2", "iso8859_2"),
        ("IBM852", "cp852"),
    ),
    *_models(
        "Polish",
        POLISH,
        ("Windows-1250", "cp1250"),
        ("ISO-8859-2", "iso8859_2"),
        ("IBM852", "cp852"),
        ("MacCentralEurope", "mac_latin2"),
    ),
    *_models(
        "Hungarian",
        HUNGARIAN,
        ("Windows-1250", "cp1250"),
        ("ISO-8859-2", "iso8859_2"),
    ),
    *_models(
        "Lithuanian",
        LITHUANIAN,
        ("Windows-1257", "cp1257"),
        ("ISO-8859-13", "iso8859_13"),
        ("ISO-8859-10", "iso8859_10"),
    ),
    *_models(
        "Estonian",
        ESTONIAN,
        ("Windows-1257", "cp1257"),
        ("ISO-8859-13", "iso8859_13"),
        ("ISO-8859-4", "iso8859_4"),
    ),
    *_models("Esperanto", ESPERANTO, ("ISO-8859-3", "iso8859_3")),
    *_models(
        "Slovak", SLOVAK, ("Windows-1250", "cp1250"), ("ISO-8859-2", "iso8859_2")
    ),
    *_models(
        "Croatian",
        CROATIAN,
        ("Windows-1250", "cp1250"),
        ("ISO-8859-2", "iso8859_2"),
        ("MacCentralEurope", "mac_latin2"),
    ),
    *_models(
        "Slovene", SLOVENE, ("ISO-8859-2", "iso8859_2"), ("Windows-1250", "cp1250")
    ),
    *_models(
        "Romanian",
        ROMANIAN,
        ("ISO-8859-16", "iso8859_16"),
        ("Windows-1250", "cp1250"),
        ("IBM852", "cp852"),
    ),
    *_models(
        "Latvian",
        LATVIAN,
        ("Windows-1257", "cp1257"),
        ("ISO-8859-13", "iso8859_13"),
        ("ISO-8859-4", "iso8859_4"),
        ("ISO-8859-10", "iso8859_10"),
    ),
    *_models("Irish", IRISH, *_WESTERN_CODE_PAGES),
    *_models("Finnish", FINNISH, *_WESTERN_CODE_PAGES),
    *_models("Maltese", MALTESE, ("ISO-8859-3", "iso8859_3")),
    *_models("Vietnamese", VIETNAMESE, ("Windows-1258", "cp1258")),
)
