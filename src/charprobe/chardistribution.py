"""
Character distribution analysis for the CJK multi-byte encodings.

Japanese and Traditional Chinese (EUC-TW) text is measured against the
block its standard reserves for the everyday repertoire (kana, CNS 11643
level-1 hanzi).  Hangul and the GB2312 and Big5 hanzi share so many byte
values that a block says little about which of them a stream is in; those
analysers instead count how many characters are among the few hundred most
common characters of their language.  Text in the right encoding hits them
far more often than text decoded with the wrong one.
"""

from __future__ import annotations

import functools

# Most common characters of each language; order is not significant.

COMMON_SIMPLIFIED_CHINESE = (
    "的一是不了在人有我他这个们中来上大为和国地到以说时要就出会可也你对生能而"
    "子那得于着下自之年过发后作里用道行所然家种事成方多经么去法学如都同现当没"
    "动面起看定天分还进好小部其些主样理心她本前开但因只从想实日军者意无力它与"
    "长把机十民第公此已工使情明性知全三又关点正业外将两高间由问很最重并物手应"
    "战向头文体政美相见被利什二等产或新己制身果加西斯月话合回特代内信表化老给"
    "世位次度门任常先海通教儿原东声提立及比员解水名真论处走义各入几口认条平系"
    "气题活尔更别打女变四神总何电数安少报才结反受目太量再感建务做接必场件计管"
    "期市直德资命山金指克许统区保至队形社便空决治展马科司五基眼书非则听白却界"
    "达光放强即像难且权思王象完设式色路记南品住告类求据程北边死张该交规万取拉"
    "格望觉术领共确传师观清今切院让识候带导争运笑飞风步改收根干造言联持组每济"
    "车亲极林服快办议往元英士证近失转夫令准布始怎呢存未远叫台单影具罗字爱击流"
    "备兵连调深商算质团集百需价花党华城石级整府离况亚请技际约示复病息究线似官"
    "火断精满支视消越器容照须九增研写称企八功吗包片史委乎查轻易早曾除农找装广"
    "显吧阿李标谈吃图念六引历首医局突专费号尽另周较注语仅考落青随选列武红响虽"
    "推势参希古众构房半节土投某案黑维革划敌致陈律足态护七兴派孩验责营星够章音"
    "跟志底站严巴例防族供效续施留讲型料终答紧黄绝奇察母京段依批群项故按河米围"
    "江织害斗双境客纪采举杀攻父苏密低朝友诉止细愿千值仍男钱破网热助倒育属坐帝"
    "限船脸职速刻乐否刚威毛状率甚独球般普怕弹校苦创假久错承印晚兰试检测习"
)

COMMON_TRADITIONAL_CHINESE = (
    "的一是不了在人有我他這個們中來上大為和國地到以說時要就出會可也你對生能而"
    "子那得於著下自之年過發後作裡用道行所然家種事成方多經麼去法學如都同現當沒"
    "動面起看定天分還進好小部其些主樣理心她本前開但因只從想實日軍者意無力它與"
    "長把機十民第公此已工使情明性知全三又關點正業外將兩高間由問很最重並物手應"
    "戰向頭文體政美相見被利什二等產或新己制身果加西斯月話合回特代內信表化老給"
    "世位次度門任常先海通教兒原東聲提立及比員解水名真論處走義各入幾口認條平系"
    "氣題活爾更別打女變四神總何電數安少報才結反受目太量再感建務做接必場件計管"
    "期市直德資命山金指克許統區保至隊形社便空決治展馬科司五基眼書非則聽白卻界"
    "達光放強即像難且權思王象完設式色路記南品住告類求據程北邊死張該交規萬取拉"
    "格望覺術領共確傳師觀清今切院讓識候帶導爭運笑飛風步改收根幹造言聯持組每濟"
    "車親極林服快辦議往元英士證近失轉夫令準布始怎呢存未遠叫台單影具羅字愛擊流"
    "備兵連調深商算質團集百需價花黨華城石級整府離況亞請技際約示復病息究線似官"
    "火斷精滿支視消越器容照須九增研寫稱企八功嗎包片史委乎查輕易早曾除農找裝廣"
    "顯吧阿李標談吃圖念六引歷首醫局突專費號盡另周較注語僅考落青隨選列武紅響雖"
    "推勢參希古眾構房半節土投某案黑維革劃敵致陳律足態護七興派孩驗責營星夠章音"
    "跟志底站嚴巴例防族供效續施留講型料終答緊黃絕奇察母京段依批群項故按河米圍"
    "江織害鬥雙境客紀採舉殺攻父蘇密低朝友訴止細願千值仍男錢破網熱助倒育屬坐帝"
    "限船臉職速刻樂否剛威毛狀率甚獨球般普怕彈校苦創假久錯承印晚蘭試檢測繁編碼"
)

COMMON_KOREAN = (
    "이다는의에가을를하고한로기서사도으대은지자리있수여것나그정아시어인해들일라"
    "적과게부주상보면전우니제와만원스내성장요소년오동국중문신공발구마위더않경회"
    "관세무연실계화생분당방학조물개통업안비미말민때선진체작현러단법까행였목거점"
    "교재치데되었간명차유호속히심래야런약결력합등영날많두번또든식음없울산드저외"
    "및료던특별시편희용모역처럼앞번늘큼금다음각했했다라고해서하는하게하지할함합"
    "니까요세요습입갑좋씨녕텍트크프포터컴퓨템레로그램파일언어글말씀드립감사여러"
    "분께서님들모든어떤같은보다위해대한통해따라관련경제정치문화사회교육환경역사"
    "세계한국미국일본중국서울부산지역시장기업회사제품서비스정보기술개발연구결과"
    "생활가족친구사람마음생각시간오늘내일어제아침점심저녁밤낮주말휴일여름겨울봄"
    "가을날씨바람비눈하늘바다산강물불집방문창길차버스기차학교학생선생님공부책"
)


@functools.lru_cache(maxsize=None)
def _common_char_bytes(codec: str, chars: str) -> frozenset[bytes]:
    """Return the two-byte encodings of *chars* in *codec*."""
    encoded = set()
    for char in chars:
        try:
            char_bytes = char.encode(codec)
        except UnicodeEncodeError:
            continue
        if len(char_bytes) == 2:
            encoded.add(char_bytes)
    return frozenset(encoded)


class CharDistributionAnalysis:
    ENOUGH_DATA_THRESHOLD = 1024
    SURE_YES = 0.99
    SURE_NO = 0.01
    MINIMUM_DATA_THRESHOLD = 3

    #: Expected ratio of frequent to infrequent characters in real text.
    TYPICAL_DISTRIBUTION_RATIO = 1.0

    def __init__(self) -> None:
        # total characters encountered
        self._total_chars = 0
        # the number of characters that count as frequent
        self._freq_chars = 0
        self.reset()

    def reset(self) -> None:
        """reset analyser, clear any state"""
        self._total_chars = 0
        self._freq_chars = 0

    def feed(self, char: bytes) -> None:
        """feed a complete multi-byte character to the analyser"""
        if not self.is_counted(char):
            return
        self._total_chars += 1
        if self.is_frequent(char):
            self._freq_chars += 1

    def get_confidence(self) -> float:
        """return confidence based on existing data"""
        # if we didn't receive any character in our consideration range,
        # or the number of frequent characters is below the minimum threshold
        if (
            self._total_chars <= 0
            or self._freq_chars <= self.MINIMUM_DATA_THRESHOLD
        ):
            return self.SURE_NO

        if self._total_chars != self._freq_chars:
            r = self._freq_chars / (
                (self._total_chars - self._freq_chars)
                * self.TYPICAL_DISTRIBUTION_RATIO
            )
            if r < self.SURE_YES:
                return r

        # normalize confidence (we don't want to be 100% sure)
        return self.SURE_YES

    def got_enough_data(self) -> bool:
        return self._total_chars > self.ENOUGH_DATA_THRESHOLD

    @property
    def total_chars(self) -> int:
        return self._total_chars

    @property
    def freq_chars(self) -> int:
        return self._freq_chars

    def is_counted(self, char: bytes) -> bool:
        """Return whether *char* takes part in the analysis at all."""
        return True

    def is_frequent(self, char: bytes) -> bool:
        """Return whether *char* lies in the encoding's everyday block."""
        return False


class _RowBlockAnalysis(CharDistributionAnalysis):
    """Two-byte characters whose lead byte is in ``LEAD`` and trail in ``TRAIL``."""

    LEAD = range(0)
    TRAIL = range(0xA1, 0xFF)

    def is_frequent(self, char: bytes) -> bool:
        return len(char) == 2 and char[0] in self.LEAD and char[1] in self.TRAIL


class _CommonCharAnalysis(CharDistributionAnalysis):
    """Counts two-byte characters from ``FIRST_LEAD`` up, which leaves out
    the symbol rows; frequent ones are among ``COMMON_CHARS``."""

    CODEC = "ascii"
    COMMON_CHARS = ""
    FIRST_LEAD = 0x100
    TYPICAL_DISTRIBUTION_RATIO = 3.0

    def __init__(self) -> None:
        self._common = _common_char_bytes(self.CODEC, self.COMMON_CHARS)
        super().__init__()

    def is_counted(self, char: bytes) -> bool:
        return len(char) == 2 and char[0] >= self.FIRST_LEAD

    def is_frequent(self, char: bytes) -> bool:
        return char in self._common


class EUCKRDistributionAnalysis(_CommonCharAnalysis):
    # KS X 1001 Hangul and hanja start at row B0
    CODEC = "euc_kr"
    COMMON_CHARS = COMMON_KOREAN
    FIRST_LEAD = 0xB0


class CP949DistributionAnalysis(EUCKRDistributionAnalysis):
    # CP949 extends EUC-KR; the KS X 1001 rows are unchanged.
    pass


class GB2312DistributionAnalysis(_CommonCharAnalysis):
    # GB 2312 hanzi start at row B0
    CODEC = "gb2312"
    COMMON_CHARS = COMMON_SIMPLIFIED_CHINESE
    FIRST_LEAD = 0xB0


class Big5DistributionAnalysis(_CommonCharAnalysis):
    # Big5 hanzi start at A440
    CODEC = "big5"
    COMMON_CHARS = COMMON_TRADITIONAL_CHINESE
    FIRST_LEAD = 0xA4


class EUCTWDistributionAnalysis(_RowBlockAnalysis):
    # CNS 11643 plane 1 level-1 hanzi
    LEAD = range(0xC4, 0xFE)
    TRAIL = range(0xA1, 0xFF)
    TYPICAL_DISTRIBUTION_RATIO = 3.0


class SJISDistributionAnalysis(CharDistributionAnalysis):
    # hiragana 829F-82F1, katakana 8340-8396
    TYPICAL_DISTRIBUTION_RATIO = 0.5

    def is_frequent(self, char: bytes) -> bool:
        if len(char) != 2:
            return False
        first_char, second_char = char
        if first_char == 0x82:
            return 0x9F <= second_char <= 0xF1
        if first_char == 0x83:
            return 0x40 <= second_char <= 0x96
        return False


class EUCJPDistributionAnalysis(CharDistributionAnalysis):
    # hiragana A4A1-A4F3, katakana A5A1-A5F6
    TYPICAL_DISTRIBUTION_RATIO = 0.5

    def is_frequent(self, char: bytes) -> bool:
        if len(char) != 2:
            return False
        first_char, second_char = char
        if first_char == 0xA4:
            return 0xA1 <= second_char <= 0xF3
        if first_char == 0xA5:
            return 0xA1 <= second_char <= 0xF6
        return False
