from sitebot.ingestion.links import extract_links, normalize_url, same_origin

SITE = "https://www.example.com"


def test_extract_links_skips_mailto_and_resolves_relative():
    html = '<a href="mailto:hello@example.com">Mail</a> <a href="/about">About</a>'

    links = extract_links(SITE + "/", html, SITE)

    assert links == ["https://www.example.com/about"]


def test_extract_links_quote_styles_and_fragments():
    html = (
        '<a href="services#video">A</a>'
        "<a href='contact'>B</a>"
        "<a href=team.html>C</a>"
        '<a href="/services">dup</a>'
    )

    links = extract_links(SITE + "/", html, SITE)

    assert sorted(links) == [
        "https://www.example.com/contact",
        "https://www.example.com/services",
        "https://www.example.com/team.html",
    ]


def test_extract_links_filters_other_origins_and_schemes():
    html = (
        '<a href="https://other.com/page">x</a>'
        '<a href="http://www.example.com/plain-http">x</a>'
        '<a href="https://www.example.com:8443/alt-port">x</a>'
        '<a href="tel:+15551234">x</a>'
        '<a href="JavaScript:void(0)">x</a>'
        '<a href="https://WWW.EXAMPLE.COM/upper">x</a>'
    )

    links = extract_links(SITE + "/", html, SITE)

    assert links == ["https://WWW.EXAMPLE.COM/upper"]


def test_extract_links_discards_malformed_urls():
    html = '<a href="http://[not-an-ip/page">bad</a><a href="/ok">ok</a>'

    assert extract_links(SITE + "/", html, SITE) == ["https://www.example.com/ok"]


def test_extract_links_resolves_against_page_url():
    html = '<a href="pricing">Pricing</a>'

    links = extract_links(SITE + "/services/", html, SITE)

    assert links == ["https://www.example.com/services/pricing"]


def test_normalize_url():
    assert normalize_url(SITE, SITE) == "https://www.example.com/"
    assert normalize_url("/a#top", SITE) == "https://www.example.com/a"
    assert normalize_url("https://www.example.com/a?x=1#f", SITE) == "https://www.example.com/a?x=1"


def test_same_origin():
    assert same_origin("https://www.example.com:443/x", SITE)
    assert not same_origin("https://example.com/x", SITE)
    assert not same_origin("/relative", SITE)
    assert not same_origin("http://[bad", SITE)
