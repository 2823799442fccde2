"""Tests for decoding tagged JSON payloads into result models."""

from datetime import date, datetime, timezone

import pytest

from bing_search import HIGHLIGHT_DELIMITER
from bing_search.decoder import coerce, decode, is_model_object
from bing_search.errors import (
    MalformedResponse,
    UnknownAttribute,
    UnknownModelType,
    UnsupportedCoercion,
)
from bing_search.models import (
    CompositeSearchResult,
    Image,
    ImageResult,
    NewsResult,
    RelatedSearchResult,
    SpellingSuggestionsResult,
    VideoResult,
    WebResult,
)
from tests.fixtures import (
    make_composite_result,
    make_image_result,
    make_news_result,
    make_related_search_result,
    make_spelling_result,
    make_thumbnail,
    make_video_result,
    make_web_result,
)


# ---------------------------------------------------------------------------
# Model objects
# ---------------------------------------------------------------------------


class TestDecodeModels:
    def test_web_result(self):
        result = decode(make_web_result())
        assert isinstance(result, WebResult)
        assert result.id == "8f3d1a5c-0000-4c2b-9d6e-000000000001"
        assert result.title == "Cat - Wikipedia"
        assert result.display_url == "en.wikipedia.org/wiki/Cat"
        assert result.summary == result.description

    def test_news_result_date(self):
        payload = {"__metadata": {"type": "NewsResult"}, "Title": "X", "Date": "2024-01-02T00:00:00"}
        result = decode(payload)
        assert isinstance(result, NewsResult)
        assert result.title == "X"
        assert result.headline == "X"
        assert result.date == datetime(2024, 1, 2)
        assert result.date.date() == date(2024, 1, 2)

    def test_news_result_utc_designator(self):
        result = decode(make_news_result())
        assert result.date == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_image_result_with_thumbnail(self):
        result = decode(make_image_result())
        assert isinstance(result, ImageResult)
        assert result.width == 1024
        assert result.height == 768
        assert result.file_size == 183412
        assert result.url == "https://example.com/cat.jpg"
        assert result.media_type == "image/jpeg"
        assert isinstance(result.thumbnail, Image)
        assert result.thumbnail.width == 300
        assert result.thumbnail.url == "https://ts1.mm.bing.net/th?id=cat"

    def test_video_result(self):
        result = decode(make_video_result())
        assert isinstance(result, VideoResult)
        assert result.run_time == 183000
        assert result.duration == 183000
        assert isinstance(result.thumbnail, Image)

    def test_related_and_spelling(self):
        related = decode(make_related_search_result())
        spelling = decode(make_spelling_result())
        assert isinstance(related, RelatedSearchResult)
        assert related.query == "cat breeds"
        assert related.bing_url == "https://www.bing.com/search?q=cat+breeds"
        assert isinstance(spelling, SpellingSuggestionsResult)
        assert spelling.suggestion == "barack obama"

    def test_missing_fields_default_to_none(self):
        result = decode({"__metadata": {"type": "WebResult"}, "Title": "Only title"})
        assert result.url is None
        assert result.description is None

    def test_highlight_delimiter_is_preserved(self):
        description = f"The {HIGHLIGHT_DELIMITER}cat{HIGHLIGHT_DELIMITER} sat"
        result = decode(make_web_result(Description=description))
        assert result.description == description

    def test_models_are_frozen(self):
        result = decode(make_web_result())
        with pytest.raises(AttributeError):
            result.title = "changed"

    def test_decoding_twice_gives_equal_results(self):
        payload = make_image_result()
        assert decode(payload) == decode(payload)
        news = make_news_result()
        assert decode(news) == decode(news)


class TestDecodeComposite:
    def test_totals_are_integers(self):
        result = decode(make_composite_result())
        assert isinstance(result, CompositeSearchResult)
        assert result.web_total == 5
        assert isinstance(result.web_total, int)
        assert result.image_total == 2

    def test_empty_totals_become_none(self):
        result = decode(make_composite_result())
        assert result.video_total is None
        assert result.spelling_suggestions_total is None

    def test_nested_results(self):
        result = decode(make_composite_result())
        assert [r.title for r in result.web] == ["Cat - Wikipedia", "Cat - Britannica"]
        assert all(isinstance(r, WebResult) for r in result.web)
        assert isinstance(result.image[0], ImageResult)
        assert result.video == []

    def test_query_alterations(self):
        result = decode(make_composite_result(AlteredQuery="cat", AlterationOverrideQuery="+catt"))
        assert result.altered_query == "cat"
        assert result.alteration_override_query == "+catt"


# ---------------------------------------------------------------------------
# Plain values
# ---------------------------------------------------------------------------


class TestDecodePlainValues:
    def test_list_decodes_element_wise(self):
        results = decode([make_web_result(), make_news_result()])
        assert isinstance(results[0], WebResult)
        assert isinstance(results[1], NewsResult)

    def test_scalars_pass_through(self):
        assert decode("text") == "text"
        assert decode(3) == 3
        assert decode(None) is None

    def test_untagged_object_passes_through(self):
        raw = {"Title": "no metadata"}
        assert decode(raw) == raw
        assert not is_model_object(raw)
        assert not is_model_object({"__metadata": {"uri": "x"}})


class TestCoerce:
    def test_integer(self):
        assert coerce("42", "integer") == 42

    def test_empty_string_is_none(self):
        assert coerce("", "integer") is None
        assert coerce("", "datetime") is None

    def test_datetime(self):
        assert coerce("2014-03-24T19:17:21Z", "datetime") == datetime(
            2014, 3, 24, 19, 17, 21, tzinfo=timezone.utc
        )

    def test_datetime_with_seven_fractional_digits(self):
        assert coerce("2014-03-24T19:17:21.1234567Z", "datetime") == datetime(
            2014, 3, 24, 19, 17, 21, 123456, tzinfo=timezone.utc
        )

    def test_datetime_with_offset(self):
        value = coerce("2014-03-24T19:17:21.123+01:00", "datetime")
        assert value.microsecond == 123000
        assert value.utcoffset().total_seconds() == 3600

    def test_unparseable_integer(self):
        with pytest.raises(MalformedResponse):
            coerce("forty-two", "integer")

    def test_unparseable_datetime(self):
        with pytest.raises(MalformedResponse):
            coerce("yesterday", "datetime")

    def test_unsupported_kind(self):
        with pytest.raises(UnsupportedCoercion):
            coerce("1.5", "float")

    def test_unsupported_kind_via_decode(self):
        with pytest.raises(UnsupportedCoercion):
            decode("1", "boolean")


# ---------------------------------------------------------------------------
# Protocol drift
# ---------------------------------------------------------------------------


class TestDecodeErrors:
    def test_unknown_type_tag(self):
        with pytest.raises(UnknownModelType) as exc_info:
            decode({"__metadata": {"type": "Bogus"}})
        assert exc_info.value.type_tag == "Bogus"

    def test_unknown_type_tag_nested_in_list(self):
        with pytest.raises(UnknownModelType):
            decode([make_web_result(), {"__metadata": {"type": "Bogus"}}])

    def test_unknown_attribute(self):
        with pytest.raises(UnknownAttribute) as exc_info:
            decode(make_web_result(Rating="5"))
        assert exc_info.value.model == "WebResult"
        assert exc_info.value.attribute == "rating"

    def test_attribute_of_another_model(self):
        with pytest.raises(UnknownAttribute):
            decode(make_thumbnail(Title="not a thumbnail field"))
