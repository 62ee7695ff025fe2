"""DataLab search trend tool."""
from typing import Any

from ...naver_client import NaverSearchClient
from ...tool_decorator import Tool
from .models import DatalabSearchArgs


@Tool(
    "datalab-search",
    "Naver DataLab search trends: relative search volume (0-100) of keyword groups over time. "
    "Compare up to 5 groups, each with up to 20 keywords. "
    "Optionally filter by device, gender and age codes.",
    DatalabSearchArgs,
)
async def datalab_search(client: NaverSearchClient, params: DatalabSearchArgs) -> Any:
    return await client.datalab_search(params)
