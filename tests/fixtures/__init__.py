"""Shared test fixtures and payload factories for Bing Search tests."""

from tests.fixtures.payloads import (
    envelope,
    make_composite_result,
    make_image_result,
    make_news_result,
    make_related_search_result,
    make_spelling_result,
    make_thumbnail,
    make_video_result,
    make_web_result,
    response_body,
)

__all__ = [
    "envelope",
    "make_composite_result",
    "make_image_result",
    "make_news_result",
    "make_related_search_result",
    "make_spelling_result",
    "make_thumbnail",
    "make_video_result",
    "make_web_result",
    "response_body",
]
