"""Document search tools - one Naver search endpoint each."""
from typing import Any

from ...naver_client import NaverSearchClient
from ...tool_decorator import Tool
from .models import (
    BlogSearchRequest,
    BookSearchRequest,
    CafeArticleSearchRequest,
    EncycSearchRequest,
    ImageSearchArgs,
    ImageSearchRequest,
    KinSearchRequest,
    NewsSearchRequest,
    SearchArgs,
    ShopSearchArgs,
    ShopSearchRequest,
    WebSearchRequest,
)


@Tool(
    "web-search",
    "Search Korean web documents with Naver. Returns title, link and description for each page.",
    SearchArgs,
)
async def web_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(WebSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "news-search",
    "Search news articles with Naver. Use sort='date' for the latest news.",
    SearchArgs,
)
async def news_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(NewsSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "blog-search",
    "Search Naver blog posts. Good for reviews, tips and personal experiences.",
    SearchArgs,
)
async def blog_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(BlogSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "shop-search",
    "Search products on Naver Shopping. Returns product name, price range, mall and category. "
    "Sort by price with sort='asc' or 'dsc'.",
    ShopSearchArgs,
)
async def shop_search(client: NaverSearchClient, params: ShopSearchArgs) -> Any:
    return await client.search(ShopSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "image-search",
    "Search images with Naver. Returns image and thumbnail links with their size.",
    ImageSearchArgs,
)
async def image_search(client: NaverSearchClient, params: ImageSearchArgs) -> Any:
    return await client.search(ImageSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "kin-search",
    "Search Naver Knowledge iN questions and answers.",
    SearchArgs,
)
async def kin_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(KinSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "book-search",
    "Search books with Naver. Returns title, author, publisher, ISBN and price.",
    SearchArgs,
)
async def book_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(BookSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "encyc-search",
    "Search the Naver encyclopedia (terms and definitions).",
    SearchArgs,
)
async def encyc_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(EncycSearchRequest(**params.model_dump(exclude_unset=True)))


@Tool(
    "cafearticle-search",
    "Search Naver Cafe (community) articles.",
    SearchArgs,
)
async def cafearticle_search(client: NaverSearchClient, params: SearchArgs) -> Any:
    return await client.search(CafeArticleSearchRequest(**params.model_dump(exclude_unset=True)))
