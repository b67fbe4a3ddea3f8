# Copyright 2020 Amazon.com, Inc. or its affiliates. All Rights Reserved.

from markdown_converter.render import pygments_highlight
from markdown_converter.render import render_markdown


def test_render_basic_markup():
    fragment = render_markdown('# Hello\n\nSome **bold** text.')
    assert '<h1>Hello</h1>' in fragment
    assert '<strong>bold</strong>' in fragment


def test_render_table():
    fragment = render_markdown('| a | b |\n| - | - |\n| 1 | 2 |\n')
    assert '<table>' in fragment
    assert '<th>a</th>' in fragment
    assert '<td>2</td>' in fragment


def test_render_line_breaks():
    fragment = render_markdown('first line\nsecond line')
    assert '<br' in fragment


def test_fenced_code_uses_injected_highlighter():
    calls = []

    def highlighter(code, language):
        calls.append((code, language))
        return '<div class="fake">highlighted</div>'

    fragment = render_markdown(
        '```python\nif a < b and c:\n    pass\n```\n\n```\nplain\n```\n', highlighter)
    assert calls == [('if a < b and c:\n    pass\n', 'python'), ('plain\n', None)]
    assert fragment.count('<div class="fake">highlighted</div>') == 2
    assert '<pre><code' not in fragment


def test_inline_code_is_not_highlighted():
    def highlighter(code, language):
        raise AssertionError('inline code must not be highlighted')

    fragment = render_markdown('use `x < y` here', highlighter)
    assert '<code>x &lt; y</code>' in fragment


def test_pygments_highlight_known_language():
    highlighted = pygments_highlight('def f():\n    return 1\n', 'python')
    assert highlighted.startswith('<div class="highlight">')
    assert '<span class="k">def</span>' in highlighted


def test_pygments_highlight_falls_back_to_plain_text():
    for language in (None, 'plaintext', 'no-such-language'):
        highlighted = pygments_highlight('a < b\n', language)
        assert highlighted.startswith('<div class="highlight">')
        assert 'a &lt; b' in highlighted
        assert '<span class="k">' not in highlighted


def test_unknown_fenced_language_renders():
    fragment = render_markdown('```no-such-language\nsome code\n```\n')
    assert '<div class="highlight">' in fragment
    assert 'some code' in fragment
