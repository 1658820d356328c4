"""
Unit tests for URL building and query value encoding
"""

import pytest

from lib.nominatim import NominatimConfigurationError, SearchRequest, buildUrl
from lib.nominatim.constants import ERROR_CODE_MALFORMED_URL
from lib.nominatim.url import encodeQueryValue


def test_build_url_without_query():
    """Test that first parameter starts the query string, dood!"""
    assert buildUrl("https://example.org/search", {"a": "1", "b": "2"}) == "https://example.org/search?a=1&b=2"


def test_build_url_with_existing_query():
    """Test that parameters are appended to an existing query string, dood!"""
    assert buildUrl("https://example.org/search?x=1", {"a": "1"}) == "https://example.org/search?x=1&a=1"


def test_build_url_without_parameters():
    """Test that base URI is returned unchanged without parameters, dood!"""
    assert buildUrl("https://example.org/search", {}) == "https://example.org/search"


def test_build_url_for_search_request():
    """Test full search URL for the Berlin example, dood!"""
    url = buildUrl(
        "https://nominatim.openstreetmap.org/search",
        SearchRequest(query="Unter den Linden 1, Berlin").buildParameters(urlEncode=True),
    )

    assert url.startswith("https://nominatim.openstreetmap.org/search?format=jsonv2&")
    assert "q=Unter+den+Linden+1%2C+Berlin" in url
    assert "&limit=10&" in url
    assert url.count("?") == 1


@pytest.mark.parametrize(
    "baseUri",
    [
        "",
        "nominatim.openstreetmap.org/search",
        "ftp://nominatim.openstreetmap.org/search",
        "https://",
        "https://nominatim.openstreetmap.org/search#results",
        "https://nominatim.openstreetmap.org/search?key=secret#",
    ],
)
def test_build_url_malformed(baseUri):
    """Test that malformed endpoints raise configuration error, dood!"""
    with pytest.raises(NominatimConfigurationError) as excInfo:
        buildUrl(baseUri, {"a": "1"})

    assert excInfo.value.code == ERROR_CODE_MALFORMED_URL
    assert excInfo.value.statusCode == 500


def test_build_url_fragment_without_parameters():
    """Test that a fragment is rejected even without parameters, dood!"""
    with pytest.raises(NominatimConfigurationError):
        buildUrl("https://nominatim.openstreetmap.org/search#top", {})


@pytest.mark.parametrize(
    "value, urlEncode, expected",
    [
        (None, True, ""),
        ("", True, ""),
        ("Berlin", True, "Berlin"),
        ("Unter den Linden 1, Berlin", True, "Unter+den+Linden+1%2C+Berlin"),
        ("Unter den Linden 1, Berlin", False, "Unter den Linden 1, Berlin"),
        ("Straße", True, "Stra%C3%9Fe"),
        ("dev@example.org", True, "dev%40example.org"),
    ],
)
def test_encode_query_value(value, urlEncode, expected):
    """Test form-urlencoding of single values, dood!"""
    assert encodeQueryValue(value, urlEncode) == expected
