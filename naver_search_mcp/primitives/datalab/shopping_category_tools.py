"""DataLab shopping insight tools at category level."""
from typing import Any

from ...naver_client import NaverSearchClient
from ...tool_decorator import Tool
from .models import DatalabShoppingArgs, DatalabShoppingCategoryArgs


@Tool(
    "datalab-shopping-category",
    "Naver Shopping Insight: relative click trends of up to 3 shopping categories over time. "
    "Categories are given by Naver Shopping category code (e.g. 50000000 for fashion clothing).",
    DatalabShoppingArgs,
)
async def datalab_shopping_category(client: NaverSearchClient, params: DatalabShoppingArgs) -> Any:
    return await client.datalab_shopping_categories(params)


@Tool(
    "datalab-shopping-by-device",
    "Naver Shopping Insight: click trend of one shopping category broken down by device (pc/mobile).",
    DatalabShoppingCategoryArgs,
)
async def datalab_shopping_by_device(client: NaverSearchClient, params: DatalabShoppingCategoryArgs) -> Any:
    return await client.datalab_shopping_by_device(params)


@Tool(
    "datalab-shopping-by-gender",
    "Naver Shopping Insight: click trend of one shopping category broken down by gender.",
    DatalabShoppingCategoryArgs,
)
async def datalab_shopping_by_gender(client: NaverSearchClient, params: DatalabShoppingCategoryArgs) -> Any:
    return await client.datalab_shopping_by_gender(params)


@Tool(
    "datalab-shopping-by-age",
    "Naver Shopping Insight: click trend of one shopping category broken down by age group.",
    DatalabShoppingCategoryArgs,
)
async def datalab_shopping_by_age(client: NaverSearchClient, params: DatalabShoppingCategoryArgs) -> Any:
    return await client.datalab_shopping_by_age(params)
