"""Pydantic models for the DataLab tools.

Field names follow the DataLab request bodies (camelCase) so a validated
model can be posted as-is with ``model_dump(exclude_none=True)``.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

TimeUnit = Literal["date", "week", "month"]
Device = Literal["pc", "mo"]
Gender = Literal["m", "f"]

# Search trend age codes: 1 = 0-12, 2 = 13-18, 3 = 19-24, ... 11 = 60+
SearchAge = Literal["1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11"]
# Shopping insight age codes are decades
ShoppingAge = Literal["10", "20", "30", "40", "50", "60"]


class _PeriodArgs(BaseModel):
    startDate: str = Field(pattern=DATE_PATTERN, description="Start date (yyyy-mm-dd, 2016-01-01 or later)")
    endDate: str = Field(pattern=DATE_PATTERN, description="End date (yyyy-mm-dd)")
    timeUnit: TimeUnit = Field(description="Aggregation unit: date, week or month")


class KeywordGroup(BaseModel):
    groupName: str = Field(description="Name of the keyword group")
    keywords: list[str] = Field(min_length=1, max_length=20, description="Search terms in the group (max 20)")


class DatalabSearchArgs(_PeriodArgs):
    keywordGroups: list[KeywordGroup] = Field(
        min_length=1, max_length=5, description="Keyword groups to compare (max 5)"
    )
    device: Optional[Device] = Field(default=None, description="pc or mo (mobile); all when omitted")
    gender: Optional[Gender] = Field(default=None, description="m or f; all when omitted")
    ages: Optional[list[SearchAge]] = Field(
        default=None, description="Age codes 1-11 (1: 0-12, 2: 13-18, 3: 19-24, ..., 11: 60+)"
    )


class CategoryGroup(BaseModel):
    name: str = Field(description="Display name of the category")
    param: list[str] = Field(min_length=1, max_length=1, description="Shopping category code, e.g. ['50000000']")


class DatalabShoppingArgs(_PeriodArgs):
    category: list[CategoryGroup] = Field(
        min_length=1, max_length=3, description="Shopping categories to compare (max 3)"
    )
    device: Optional[Device] = Field(default=None, description="pc or mo (mobile); all when omitted")
    gender: Optional[Gender] = Field(default=None, description="m or f; all when omitted")
    ages: Optional[list[ShoppingAge]] = Field(default=None, description="Age groups: 10, 20, 30, 40, 50, 60")


class DatalabShoppingCategoryArgs(_PeriodArgs):
    category: str = Field(description="Shopping category code, e.g. '50000000'")
    device: Optional[Device] = Field(default=None, description="pc or mo (mobile); all when omitted")
    gender: Optional[Gender] = Field(default=None, description="m or f; all when omitted")
    ages: Optional[list[ShoppingAge]] = Field(default=None, description="Age groups: 10, 20, 30, 40, 50, 60")


class KeywordParam(BaseModel):
    name: str = Field(description="Display name of the keyword")
    param: list[str] = Field(min_length=1, max_length=1, description="The keyword itself, e.g. ['jeans']")


class DatalabShoppingKeywordsArgs(_PeriodArgs):
    category: str = Field(description="Shopping category code the keywords belong to")
    keyword: list[KeywordParam] = Field(
        min_length=1, max_length=5, description="Keywords to compare (max 5)"
    )
    device: Optional[Device] = Field(default=None, description="pc or mo (mobile); all when omitted")
    gender: Optional[Gender] = Field(default=None, description="m or f; all when omitted")
    ages: Optional[list[ShoppingAge]] = Field(default=None, description="Age groups: 10, 20, 30, 40, 50, 60")


class DatalabShoppingKeywordArgs(_PeriodArgs):
    category: str = Field(description="Shopping category code the keyword belongs to")
    keyword: str = Field(description="Keyword to break down")
    device: Optional[Device] = Field(default=None, description="pc or mo (mobile); all when omitted")
    gender: Optional[Gender] = Field(default=None, description="m or f; all when omitted")
    ages: Optional[list[ShoppingAge]] = Field(default=None, description="Age groups: 10, 20, 30, 40, 50, 60")
