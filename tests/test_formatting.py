import pytest

from post_excerpt.content.formatting import autop


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
def test_blank_text_gives_empty_string(text):
    assert autop(text) == ""


def test_single_line_is_wrapped():
    assert autop("Hello <b>world</b>") == "<p>Hello <b>world</b></p>"


def test_blank_lines_split_paragraphs():
    assert autop("one\n\n\ntwo\r\n\r\nthree") == "<p>one</p>\n<p>two</p>\n<p>three</p>"


def test_single_newlines_become_breaks():
    assert autop("line one\nline two") == "<p>line one<br />\nline two</p>"
    assert autop("line one\nline two", br=False) == "<p>line one\nline two</p>"


def test_block_level_markup_is_left_alone():
    html = "<ul>\n<li>a</li>\n</ul>"
    assert autop(f"intro\n\n{html}") == f"<p>intro</p>\n{html}"
    assert autop("<p>already</p>") == "<p>already</p>"
    assert autop("<H2>Title</H2>") == "<H2>Title</H2>"


def test_pre_content_is_preserved():
    pre = "<pre>\ncode\n\n  indented\n</pre>"
    assert autop(f"before\n\n{pre}\n\nafter") == f"<p>before</p>\n{pre}\n<p>after</p>"


def test_block_markup_after_text_is_not_wrapped():
    assert autop("Intro line\n<ul><li>a</li></ul>") == "<p>Intro line</p>\n<ul>\n<li>a</li>\n</ul>"


def test_text_after_block_markup_is_wrapped():
    assert autop("<div>box</div>\ntrailing words") == "<div>box</div>\n<p>trailing words</p>"


def test_text_before_closing_block_tag():
    assert autop("<div>\n\nInner text\n</div>") == "<div>\n<p>Inner text</p></div>"


def test_hr_splits_paragraphs():
    assert autop("one<hr />two") == "<p>one</p>\n<hr />\n<p>two</p>"


def test_block_tag_prefixes_are_not_confused():
    assert autop("<b>bold</b> and <br> here") == "<p><b>bold</b> and <br> here</p>"
