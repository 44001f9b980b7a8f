"""
All of the Enums that are used throughout the charprobe package.
"""

import enum


class ProbingState(enum.IntEnum):
    """
    This enum represents the different states a prober can be in.
    """

    DETECTING = 0
    FOUND_IT = 1
    NOT_ME = 2


class MachineState(enum.IntEnum):
    """
    This enum represents the different states a coding state machine can be
    in.  Values above ``ITS_ME`` are model-specific intermediate states.
    """

    START = 0
    ERROR = 1
    ITS_ME = 2


class LanguageFilter(enum.Flag):
    """
    This enum represents the different language filters we can apply to a
    ``UniversalDetector``.
    """

    CHINESE_SIMPLIFIED = enum.auto()
    CHINESE_TRADITIONAL = enum.auto()
    JAPANESE = enum.auto()
    KOREAN = enum.auto()
    NON_CJK = enum.auto()
    CHINESE = CHINESE_SIMPLIFIED | CHINESE_TRADITIONAL
    CJK = CHINESE | JAPANESE | KOREAN
    ALL = NON_CJK | CJK


class SequenceLikelihood(enum.IntEnum):
    """
    This enum represents the likelihood of a character following the previous one.
    """

    NEGATIVE = 0
    UNLIKELY = 1
    LIKELY = 2
    POSITIVE = 3


class CharacterCategory(enum.IntEnum):
    """
    This enum represents the different categories language models for
    ``SingleByteCharSetProber`` put bytes into.

    Anything less than TRANSPARENT is the index of a letter in the model's
    alphabet.
    """

    UNDEFINED = 255
    CONTROL = 254
    SYMBOL = 253
    MARKER = 252
    FOREIGN = 251
    ASCII_LETTER = 250
    TRANSPARENT = 249
