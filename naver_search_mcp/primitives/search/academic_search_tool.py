"""Academic search tool - papers and reports (Naver 'doc' endpoint)."""
from typing import Any

from ...naver_client import NaverSearchClient
from ...tool_decorator import Tool
from .models import AcademicSearchArgs, AcademicSearchRequest


@Tool(
    "academic-search",
    "Search academic papers, theses and research reports indexed by Naver.",
    AcademicSearchArgs,
)
async def academic_search(client: NaverSearchClient, params: AcademicSearchArgs) -> Any:
    return await client.search_academic(AcademicSearchRequest(**params.model_dump(exclude_unset=True)))
