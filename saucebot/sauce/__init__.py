"""Reverse image search ("sauce") lookups."""

from saucebot.sauce.client import SauceClient
from saucebot.sauce.errors import (
    DecodeError,
    ImageReadError,
    NetworkError,
    NoResultsError,
    NoSauceError,
    RequestBuildError,
    ResponseReadError,
    SauceError,
    UploadError,
)
from saucebot.sauce.extract import extract_between
from saucebot.sauce.google import GoogleSauceFinder, resolve_via_google
from saucebot.sauce.models import RankedResultSet, RequestSpec, SearchResult, SimilarityMatch
from saucebot.sauce.saucenao import SaucenaoSauceFinder, resolve_via_saucenao
from saucebot.sauce.service import SauceService

__all__ = [
    "DecodeError",
    "GoogleSauceFinder",
    "ImageReadError",
    "NetworkError",
    "NoResultsError",
    "NoSauceError",
    "RankedResultSet",
    "RequestBuildError",
    "RequestSpec",
    "ResponseReadError",
    "SauceClient",
    "SauceError",
    "SauceService",
    "SaucenaoSauceFinder",
    "SearchResult",
    "SimilarityMatch",
    "UploadError",
    "extract_between",
    "resolve_via_google",
    "resolve_via_saucenao",
]
