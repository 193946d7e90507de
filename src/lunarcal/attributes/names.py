"""Chinese text for lunar dates. Inputs are assumed already validated."""
from __future__ import annotations

CN_DIGITS = ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九")

MONTH_NAMES = ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊")

DAY_NAMES = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)

ANIMALS = ("鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪")

STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")

BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")

LEAP_PREFIX = "闰"


def year_to_chinese(year: int) -> str:
    """Digit-by-digit numeral, e.g. 2026 -> '二〇二六'."""
    return "".join(CN_DIGITS[int(c)] for c in str(year))


def month_name(month: int, is_leap: bool = False) -> str:
    """1 -> '正月', 12 -> '腊月'; leap months get the '闰' prefix."""
    name = MONTH_NAMES[month - 1] + "月"
    return LEAP_PREFIX + name if is_leap else name


def day_name(day: int) -> str:
    return DAY_NAMES[day - 1]


def zodiac_animal(year: int) -> str:
    return ANIMALS[(year - 4) % 12]


def ganzhi_year(year: int) -> str:
    """Stem-branch (sexagenary) name of a lunar year, e.g. 2024 -> '甲辰'."""
    return STEMS[(year - 4) % 10] + BRANCHES[(year - 4) % 12]
