"""Pydantic models for the search tools.

Two layers:
- *Args models are what a tool accepts; their JSON schema is advertised.
- *Request models add a literal ``type`` tag naming the Naver search
  endpoint. Handlers build one of these and hand it to the client, which
  uses the tag to pick the URL.

Optional fields default to None so that unset values are left out of the
query string and Naver applies its own defaults.
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class SearchArgs(BaseModel):
    """Arguments shared by the document search endpoints."""
    query: str = Field(description="Search query (UTF-8)")
    display: Optional[int] = Field(
        default=None, ge=1, le=100, description="Number of results to return (default 10, max 100)"
    )
    start: Optional[int] = Field(
        default=None, ge=1, le=1000, description="Start position of results (default 1, max 1000)"
    )
    sort: Optional[Literal["sim", "date"]] = Field(
        default=None, description="Sort order: sim (relevance, default) or date (newest first)"
    )


class ShopSearchArgs(SearchArgs):
    sort: Optional[Literal["sim", "date", "asc", "dsc"]] = Field(
        default=None,
        description="Sort order: sim (relevance), date, asc (price ascending), dsc (price descending)",
    )
    filter: Optional[Literal["naverpay"]] = Field(
        default=None, description="Only show products payable with Naver Pay"
    )
    exclude: Optional[str] = Field(
        default=None,
        pattern=r"^(used|rental|cbshop)(:(used|rental|cbshop))*$",
        description="Product kinds to exclude, colon separated: used, rental, cbshop (e.g. 'used:cbshop')",
    )


class ImageSearchArgs(SearchArgs):
    filter: Optional[Literal["all", "large", "medium", "small"]] = Field(
        default=None, description="Image size filter (default all)"
    )


class AcademicSearchArgs(BaseModel):
    query: str = Field(description="Search query (UTF-8)")
    display: Optional[int] = Field(
        default=None, ge=1, le=100, description="Number of results to return (default 10, max 100)"
    )
    start: Optional[int] = Field(
        default=None, ge=1, le=1000, description="Start position of results (default 1, max 1000)"
    )


class LocalSearchArgs(BaseModel):
    query: str = Field(description="Search query, e.g. 'Gangnam cafe'")
    display: Optional[int] = Field(
        default=None, ge=1, le=5, description="Number of results to return (default 1, max 5)"
    )
    start: Optional[int] = Field(
        default=None, ge=1, le=1, description="Start position of results (only 1 is supported)"
    )
    sort: Optional[Literal["random", "comment"]] = Field(
        default=None, description="Sort order: random (accuracy, default) or comment (review count)"
    )


# ============================================================================
# Request variants - one per Naver search endpoint
# ============================================================================

class WebSearchRequest(SearchArgs):
    type: Literal["webkr"] = "webkr"


class NewsSearchRequest(SearchArgs):
    type: Literal["news"] = "news"


class BlogSearchRequest(SearchArgs):
    type: Literal["blog"] = "blog"


class KinSearchRequest(SearchArgs):
    type: Literal["kin"] = "kin"


class BookSearchRequest(SearchArgs):
    type: Literal["book"] = "book"


class EncycSearchRequest(SearchArgs):
    type: Literal["encyc"] = "encyc"


class CafeArticleSearchRequest(SearchArgs):
    type: Literal["cafearticle"] = "cafearticle"


class ShopSearchRequest(ShopSearchArgs):
    type: Literal["shop"] = "shop"


class ImageSearchRequest(ImageSearchArgs):
    type: Literal["image"] = "image"


class AcademicSearchRequest(AcademicSearchArgs):
    type: Literal["doc"] = "doc"


class LocalSearchRequest(LocalSearchArgs):
    type: Literal["local"] = "local"


SearchRequest = Annotated[
    Union[
        WebSearchRequest,
        NewsSearchRequest,
        BlogSearchRequest,
        KinSearchRequest,
        BookSearchRequest,
        EncycSearchRequest,
        CafeArticleSearchRequest,
        ShopSearchRequest,
        ImageSearchRequest,
        AcademicSearchRequest,
        LocalSearchRequest,
    ],
    Field(discriminator="type"),
]
