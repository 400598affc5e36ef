from MarkOver.constants import CLASS_QUOTE, OPENER_PREFIX
from MarkOver.delimiters import find_matching_close, find_matching_tag_end, find_opener, is_opener, iter_markers


def _close_for_first_opener(text):
    opener = find_opener(text)
    return find_matching_close(text, opener.start(), len(opener.group(0)))


def test_matches_simple_block():
    text = "<>'a' body </>"
    assert _close_for_first_opener(text) == text.index("</>")


def test_skips_nested_blocks():
    text = "<>'a' X <>'b' Y </> Z </> after </>"
    assert _close_for_first_opener(text) == text.index("</> after")


def test_unclosed_returns_none():
    assert _close_for_first_opener("<>'a' X <>'b' Y </>") is None
    assert _close_for_first_opener("<>'a' nothing") is None


def test_empty_class_list_counts_as_opener():
    text = "<>'a' <>'' inner </> outer </>"
    assert text[_close_for_first_opener(text):] == "</>"


def test_marker_like_class_list_does_not_stall():
    text = "<>'a' <>'</>' x </> </>"
    assert text[_close_for_first_opener(text):] == "</>"


def test_opener_without_closing_quote_is_plain_text():
    text = "<>'a' <>'broken </>"
    assert _close_for_first_opener(text) == text.index("</>")


def test_only_openers_after_start():
    assert _close_for_first_opener("<>'a' <>'b' <>'c'") is None


def test_find_matching_tag_end_balances_divs():
    html = '<div class="a"><div class="b"></div><div class="c"></div></div><div class="d"></div>'
    end = find_matching_tag_end(html, 0)
    assert html[: end + len("</div>")] == '<div class="a"><div class="b"></div><div class="c"></div></div>'


def test_find_matching_tag_end_unbalanced():
    assert find_matching_tag_end('<div class="a"><div class="b"></div>', 0) is None


def test_iter_markers_keeps_document_order():
    text = "<>'a' x <>'</>' y </> z </>"
    markers = [(is_opener(m), m.group(0)) for m in iter_markers(text)]
    assert markers == [(True, "<>'a'"), (True, "<>'</>'"), (False, "</>"), (False, "</>")]


def test_opener_pattern_follows_marker_constants():
    opener = find_opener("x " + OPENER_PREFIX + "card p-4" + CLASS_QUOTE + " y")
    assert opener.group(0) == OPENER_PREFIX + "card p-4" + CLASS_QUOTE
    assert opener.group("classes") == "card p-4"
    assert find_opener(OPENER_PREFIX + "card") is None
