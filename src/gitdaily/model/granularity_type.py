# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Literal


class TimeGranularity(StrEnum):
    DAY = "Day"
    WEEK = "Week"
    BIWEEK = "2 Weeks"
    MONTH = "Month"


Alignment = Literal["center", "left"]
