from post_excerpt.content.shortcodes import ShortcodeRegistry, parse_atts, shortcode_atts


def echo_registry(*tags: str) -> tuple[ShortcodeRegistry, list]:
    seen = []
    registry = ShortcodeRegistry()
    for tag in tags:
        def handler(atts, content, tag):
            seen.append((tag, atts, content))
            return f"<{tag}>"
        registry.add(tag, handler)
    return registry, seen


def test_text_without_brackets_is_returned_unchanged():
    registry, seen = echo_registry("gallery")
    assert registry.expand("plain text") == "plain text"
    assert seen == []


def test_unregistered_tags_are_left_alone(shortcodes):
    assert shortcodes.expand("[italic]x[/italic] and [bold]y[/bold]") == "[italic]x[/italic] and <b>y</b>"


def test_self_closing_and_bare_tags():
    registry, seen = echo_registry("gallery")
    assert registry.expand("a [gallery /] b [gallery] c") == "a <gallery> b <gallery> c"
    assert [content for _, _, content in seen] == [None, None]


def test_enclosing_tag_receives_raw_content():
    registry, seen = echo_registry("quote")
    registry.expand('[quote cite="Ada"]Some [b]text[/b][/quote]')
    assert seen == [("quote", {"cite": "Ada"}, "Some [b]text[/b]")]


def test_repeated_tags_expand_independently(shortcodes):
    assert shortcodes.expand("[bold]outer[/bold] [bold]two[/bold]") == "<b>outer</b> <b>two</b>"


def test_escaped_shortcode_renders_literally(shortcodes):
    assert shortcodes.expand("use [[bold]] for bold") == "use [bold] for bold"


def test_tag_prefix_does_not_match_longer_name():
    registry, seen = echo_registry("foo")
    assert registry.expand("[foo-bar] [foo]") == "[foo-bar] <foo>"


def test_longer_tag_wins_over_prefix():
    registry, seen = echo_registry("foo", "foo-bar")
    assert registry.expand("[foo-bar]") == "<foo-bar>"


def test_parse_atts_forms():
    atts = parse_atts(' ID="7" size=\'large\' columns=3 "quoted pos" bare ')
    assert atts == {"id": "7", "size": "large", "columns": "3", 0: "quoted pos", 1: "bare"}


def test_parse_atts_normalises_nbsp():
    assert parse_atts('a="1"\u00a0b="2"') == {"a": "1", "b": "2"}


def test_shortcode_atts_drops_unknown_keys():
    merged = shortcode_atts({"size": "thumb", "link": "file"}, {"size": "large", "bogus": "x"})
    assert merged == {"size": "large", "link": "file"}


def test_invalid_tag_names_are_ignored():
    registry = ShortcodeRegistry()
    for bad in ["", "  ", "has space", "a/b", "x=y", "[x]", "<x>"]:
        registry.add(bad, lambda atts, content, tag: "!")
    assert registry.tags() == []


def test_remove_and_exists(shortcodes):
    assert shortcodes.exists("bold")
    shortcodes.remove("bold")
    assert not shortcodes.exists("bold")
    assert shortcodes.expand("[bold]x[/bold]") == "[bold]x[/bold]"


def test_strip_removes_registered_tags_only(shortcodes):
    assert shortcodes.strip("a [bold]b[/bold] [[bold]] [em]c[/em]") == "a  [bold] [em]c[/em]"


def test_handler_returning_none_renders_empty():
    registry = ShortcodeRegistry()
    registry.add("nothing", lambda atts, content, tag: None)
    assert registry.expand("a[nothing]b") == "ab"
