from MarkOver import code_guard, renderer_html
from MarkOver.delimiters import OPENER_RE
from MarkOver.constants import CLOSER


def test_protect_replaces_inline_and_fenced_spans():
    text = "Inline `<>'x'` here.\n\n```js\nconst a = \"</>\";\n```\n"
    guarded, table = code_guard.protect(text)
    assert list(table.values()) == ["`<>'x'`", "```js\nconst a = \"</>\";\n```"]
    assert OPENER_RE.search(guarded) is None
    assert CLOSER not in guarded
    assert "`" not in guarded


def test_restore_returns_original_text():
    text = "a `b` c\n```\n`nested` inside fence\n```\nend `e`"
    guarded, table = code_guard.protect(text)
    assert code_guard.restore(guarded, table) == text


def test_restore_is_idempotent():
    text = "keep `this` and\n```\nthat\n```"
    guarded, table = code_guard.protect(text)
    once = code_guard.restore(guarded, table)
    assert code_guard.restore(once, table) == once == text


def test_tokens_are_unique_per_span():
    guarded, table = code_guard.protect("`a` `a` `a`")
    assert list(table.values()) == ["`a`", "`a`", "`a`"]
    tokens = guarded.split(" ")
    assert len(set(tokens)) == 3


def test_text_without_code_is_untouched():
    guarded, table = code_guard.protect("<>'p-4' plain </>")
    assert guarded == "<>'p-4' plain </>"
    assert list(table.values()) == []
    assert code_guard.restore(guarded, table) == guarded


def test_protect_does_not_reuse_tokens_present_in_text():
    first, table = code_guard.protect("`x`")
    second, second_table = code_guard.protect(first + " `y`")
    assert code_guard.restore(second, second_table) == first + " `y`"


def test_double_backtick_span_is_protected():
    text = "Write ``<>'card' body </>`` to open a card."
    guarded, table = code_guard.protect(text)
    assert list(table.values()) == ["``<>'card' body </>``"]
    assert OPENER_RE.search(guarded) is None
    assert CLOSER not in guarded
    assert code_guard.restore(guarded, table) == text


def test_double_backtick_span_renders_as_code():
    result = renderer_html.parse("Write ``<>'card' body </>`` to open a card.")
    assert result.ok
    assert "<code>&lt;&gt;'card' body &lt;/&gt;</code>" in result.html
    assert "<div" not in result.html


def test_backtick_runs_must_match_in_length():
    guarded, table = code_guard.protect("``a`b`` and ```\nfence\n```")
    assert list(table.values()) == ["``a`b``", "```\nfence\n```"]
