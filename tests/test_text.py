import pytest

from sitebot.ingestion.text import chunk_text, strip_html


def test_strip_html_drops_script_and_style_content():
    html = (
        "<html><head><style>.secret { color: red; }</style>"
        "<SCRIPT type='text/javascript'>var hidden = 'tracking';</SCRIPT></head>"
        "<body><h1>Welcome</h1><p>We film weddings.</p></body></html>"
    )

    text = strip_html(html)

    assert text == "Welcome We film weddings."
    assert "secret" not in text
    assert "tracking" not in text


def test_strip_html_handles_multiline_and_unterminated_script():
    html = "<p>Visible</p><script>\nline one\nline two\n</script><p>After</p><script>never closed"

    text = strip_html(html)

    assert text == "Visible After"


def test_strip_html_collapses_whitespace_and_decodes_entities():
    html = "  <div>Fish &amp; Chips</div>\n\n\t<p>a&nbsp;&lt;b&gt;</p>  "

    assert strip_html(html) == "Fish & Chips a <b>"


def test_strip_html_decodes_uppercase_ampersand_entity():
    assert strip_html("Fish &AMP; Chips &Amp; Peas") == "Fish & Chips & Peas"


def test_strip_html_empty_input():
    assert strip_html("") == ""
    assert strip_html("<br/><hr>") == ""


@pytest.mark.parametrize("max_len", [1, 3, 7, 900])
def test_chunk_text_is_lossless_and_bounded(max_len):
    text = "We are a full-service video production studio based in the Midwest. " * 20

    chunks = chunk_text(text, max_len)

    assert "".join(chunks) == text
    assert all(0 < len(c) <= max_len for c in chunks)
    assert all(len(c) == max_len for c in chunks[:-1])


def test_chunk_text_short_and_empty_text():
    assert chunk_text("", 10) == []
    assert chunk_text("abc", 10) == ["abc"]


def test_chunk_text_rejects_non_positive_length():
    with pytest.raises(ValueError):
        chunk_text("abc", 0)
