# Copyright 2021 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Markdown to HTML fragment rendering with pluggable code highlighting."""

import html
import logging
import re
from typing import Any
from typing import Callable
from typing import List
from typing import Optional

import markdown
from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.lexers import TextLexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ['tables', 'fenced_code', 'nl2br']
HIGHLIGHT_CSS_CLASS = 'highlight'
PLAIN_LANGUAGES = {'plaintext', 'text', 'plain', 'txt'}

CODE_BLOCK_RE = re.compile(
    r'<pre><code(?: class="language-([^"]*)")?>(.*?)</code></pre>', re.DOTALL)

# Takes the raw code and its declared language tag, returns highlighted HTML
Highlighter = Callable[[str, Optional[str]], str]
Renderer = Callable[[str], str]


def pygments_highlight(code: str, language: Optional[str]) -> str:
    """
    Highlight a code block with Pygments.

    Absent, plain or unknown language tags fall back to the plain text lexer.
    """
    lexer = TextLexer()
    if language and language.lower() not in PLAIN_LANGUAGES:
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug(f'No lexer for language "{language}", using plain text')
    return highlight(code, lexer, HtmlFormatter(cssclass=HIGHLIGHT_CSS_CLASS))


class CodeHighlightPostprocessor(Postprocessor):
    """Replace every rendered <pre><code> block with the highlighter's markup."""

    def __init__(self, md: markdown.Markdown, highlighter: Highlighter) -> None:
        super().__init__(md)
        self.highlighter = highlighter

    def _highlight_block(self, match: 're.Match[str]') -> str:
        language = match.group(1) or None
        code = html.unescape(match.group(2))
        return self.highlighter(code, language)

    def run(self, text: str) -> str:
        return CODE_BLOCK_RE.sub(self._highlight_block, text)


class CodeHighlightExtension(Extension):

    def __init__(self, highlighter: Highlighter, **kwargs) -> None:
        self.highlighter = highlighter
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # Runs after raw HTML (fenced blocks) has been put back into the output
        md.postprocessors.register(
            CodeHighlightPostprocessor(md, self.highlighter), 'code_highlight', 5)


def render_markdown(text: str, highlighter: Highlighter = pygments_highlight) -> str:
    """Render Markdown text to an HTML fragment with tables, line breaks and fenced code."""
    extensions: List[Any] = [*MARKDOWN_EXTENSIONS, CodeHighlightExtension(highlighter)]
    return markdown.markdown(text, extensions=extensions, output_format='html')
