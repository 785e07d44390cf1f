"""
ethiocal.engines.constants
--------------------------
Fixed numbers of the Ethiopic calendar and the static name tables.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

MONTHS_PER_YEAR = 13
DAYS_PER_REGULAR_MONTH = 30
PAGUMEN = 13
PAGUMEN_DAYS_NORMAL = 5
PAGUMEN_DAYS_LEAP = 6
DAYS_PER_YEAR_NORMAL = 365
DAYS_PER_YEAR_LEAP = 366
LEAP_YEAR_CYCLE = 4
DAYS_PER_CYCLE = 4 * DAYS_PER_YEAR_NORMAL + 1  # 1461

# Ethiopic day count of ISO epoch day 0 (1970-01-01 = 1962-04-23 Ethiopic).
EPOCH_OFFSET = 716367

MONTH_NAMES_ENGLISH: Tuple[str, ...] = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahsas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Genbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagumen",
)

MONTH_NAMES_AMHARIC: Tuple[str, ...] = (
    "መስከረም",
    "ጥቅምት",
    "ኅዳር",
    "ታኅሣሥ",
    "ጥር",
    "የካቲት",
    "መጋቢት",
    "ሚያዝያ",
    "ግንቦት",
    "ሰኔ",
    "ሐምሌ",
    "ነሐሴ",
    "ጳጉሜን",
)

# ISO weekday order, Monday first.
WEEKDAY_NAMES_ENGLISH: Tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

WEEKDAY_NAMES_AMHARIC: Tuple[str, ...] = (
    "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ", "እሑድ",
)

MONTH_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "en": MONTH_NAMES_ENGLISH,
    "am": MONTH_NAMES_AMHARIC,
})

WEEKDAY_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "en": WEEKDAY_NAMES_ENGLISH,
    "am": WEEKDAY_NAMES_AMHARIC,
})

LOCALES: Tuple[str, ...] = tuple(MONTH_NAMES)
