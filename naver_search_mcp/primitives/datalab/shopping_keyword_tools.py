"""DataLab shopping insight tools at keyword level."""
from typing import Any

from ...naver_client import NaverSearchClient
from ...tool_decorator import Tool
from .models import DatalabShoppingKeywordArgs, DatalabShoppingKeywordsArgs


@Tool(
    "datalab-shopping-keywords",
    "Naver Shopping Insight: relative click trends of up to 5 keywords within one shopping category.",
    DatalabShoppingKeywordsArgs,
)
async def datalab_shopping_keywords(client: NaverSearchClient, params: DatalabShoppingKeywordsArgs) -> Any:
    return await client.datalab_shopping_keywords(params)


@Tool(
    "datalab-shopping-keyword-by-device",
    "Naver Shopping Insight: click trend of one keyword in a category broken down by device (pc/mobile).",
    DatalabShoppingKeywordArgs,
)
async def datalab_shopping_keyword_by_device(client: NaverSearchClient, params: DatalabShoppingKeywordArgs) -> Any:
    return await client.datalab_shopping_keyword_by_device(params)


@Tool(
    "datalab-shopping-keyword-by-gender",
    "Naver Shopping Insight: click trend of one keyword in a category broken down by gender.",
    DatalabShoppingKeywordArgs,
)
async def datalab_shopping_keyword_by_gender(client: NaverSearchClient, params: DatalabShoppingKeywordArgs) -> Any:
    return await client.datalab_shopping_keyword_by_gender(params)


@Tool(
    "datalab-shopping-keyword-by-age",
    "Naver Shopping Insight: click trend of one keyword in a category broken down by age group.",
    DatalabShoppingKeywordArgs,
)
async def datalab_shopping_keyword_by_age(client: NaverSearchClient, params: DatalabShoppingKeywordArgs) -> Any:
    return await client.datalab_shopping_keyword_by_age(params)
