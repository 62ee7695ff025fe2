"""Local search tool - businesses and places registered with Naver."""
from typing import Any

from ...naver_client import NaverSearchClient
from ...tool_decorator import Tool
from .models import LocalSearchArgs, LocalSearchRequest


@Tool(
    "local-search",
    "Search local businesses and places (restaurants, cafes, shops) registered with Naver. "
    "Returns name, category, address, road address and map coordinates. "
    "Naver returns at most 5 results per call.",
    LocalSearchArgs,
)
async def local_search(client: NaverSearchClient, params: LocalSearchArgs) -> Any:
    return await client.search_local(LocalSearchRequest(**params.model_dump(exclude_unset=True)))
