from core.classifier import classify, is_self_hosted
from core.url_utils import parse_url
from models.resource import RequestOrigin, ResourceKind


def test_relative_urls_are_always_self_hosted(origin):
    assert is_self_hosted(parse_url("/a.png"), origin, "https")
    assert is_self_hosted(parse_url("images/a.png"), RequestOrigin(), "http")
    assert is_self_hosted(parse_url("/a.png"), RequestOrigin(host="other.test", port="8080"), "https")


def test_same_host_and_scheme(origin):
    assert is_self_hosted(parse_url("https://site.test/x.js"), origin, "https")
    assert is_self_hosted(parse_url("https://site.test:443/x.js"), origin, "https")
    assert is_self_hosted(parse_url("//site.test/x.js"), origin, "https")
    assert is_self_hosted(parse_url("https://SITE.test/x.js"), RequestOrigin(host="Site.Test"), "https")


def test_scheme_and_port_mismatch(origin):
    # The origin takes the request's scheme, so plain http is another origin
    assert not is_self_hosted(parse_url("http://site.test/x.js"), origin, "https")
    assert not is_self_hosted(parse_url("https://site.test:8443/x.js"), origin, "https")
    assert not is_self_hosted(parse_url("https://cdn.example.com/x.js"), origin, "https")


def test_origin_port():
    origin = RequestOrigin(host="site.test", port="8080")
    assert is_self_hosted(parse_url("https://site.test:8080/x.js"), origin, "https")
    assert not is_self_hosted(parse_url("https://site.test/x.js"), origin, "https")

    # The default port of the request's scheme is implied
    origin = RequestOrigin(host="site.test", port="443")
    assert is_self_hosted(parse_url("https://site.test/x.js"), origin, "https")


def test_credentials_take_part_in_comparison():
    origin = RequestOrigin(host="site.test", user="bob", password="pw")
    assert is_self_hosted(parse_url("https://bob:pw@site.test/x.js"), origin, "https")
    assert not is_self_hosted(parse_url("https://site.test/x.js"), origin, "https")
    assert is_self_hosted(parse_url("https://site.test/x.js"), origin, "https", match_credentials=False)


def test_empty_origin_matches_no_host():
    assert not is_self_hosted(parse_url("https://site.test/x.js"), RequestOrigin(), "https")


def test_classify(origin):
    assert classify(parse_url("/a.png"), ResourceKind.IMAGE, origin, "https") == ResourceKind.IMAGE
    assert classify(parse_url("https://cdn.example.com/c.js"), ResourceKind.SCRIPT, origin, "https") == ResourceKind.PRECONNECT


def test_bracketed_ipv6_origin():
    origin = RequestOrigin(host="[::1]", port="80")
    assert is_self_hosted(parse_url("http://[::1]/a.js"), origin, "http")
    assert not is_self_hosted(parse_url("http://[::2]/a.js"), origin, "http")
