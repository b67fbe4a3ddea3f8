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

import re
from string import Template

DEFAULT_TITLE = 'Converted Document'

TITLE_RE = re.compile(r'^#[ \t]*(.*)$', re.MULTILINE)

FONT_STYLESHEET_URL = (
    'https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700&display=swap')
HIGHLIGHT_STYLESHEET_URL = (
    'https://cdn.jsdelivr.net/gh/richleland/pygments-css@master/github.css')

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$title</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="$font_stylesheet" rel="stylesheet">
    <link href="$highlight_stylesheet" rel="stylesheet">
    <style>
        body {
            font-family: 'Inter', sans-serif;
            max-width: 850px;
            margin: 40px auto;
            padding: 30px;
            line-height: 1.7;
            color: #333;
            background-color: #ffffff;
            border-radius: 10px;
            box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -4px rgba(0, 0, 0, 0.1);
        }

        @media (max-width: 600px) {
            body {
                margin: 20px;
                padding: 15px;
            }
        }

        h1, h2, h3 {
            color: #1f2937;
            border-bottom: 2px solid #e5e7eb;
            padding-bottom: 10px;
            margin-top: 35px;
            font-weight: 700;
        }
        h1 { font-size: 2.5rem; }
        h2 { font-size: 2rem; }
        h3 { font-size: 1.5rem; }

        pre, .highlight {
            background-color: #f4f6f8;
            border: 1px solid #e5e7eb;
            border-radius: 6px;
            overflow-x: auto;
            margin: 20px 0;
        }
        pre { padding: 16px; }
        .highlight pre {
            border: none;
            margin: 0;
        }
        pre, code {
            font-family: 'Consolas', 'Courier New', monospace;
            font-size: 0.95rem;
            color: #374151;
        }
        p > code, li > code, td > code {
            background-color: #f0f0f5;
            padding: 3px 6px;
            border-radius: 3px;
        }

        a {
            color: #2563eb;
            text-decoration: none;
            transition: color 0.2s;
        }
        a:hover {
            color: #1d4ed8;
            text-decoration: underline;
        }

        ul, ol {
            margin: 15px 0 15px 25px;
            padding-left: 0;
        }
        li {
            margin-bottom: 8px;
        }

        table {
            border-collapse: collapse;
            width: 100%;
            margin: 20px 0;
        }
        th, td {
            border: 1px solid #e5e7eb;
            padding: 10px 12px;
            text-align: left;
        }
        thead th {
            background-color: #f3f4f6;
            color: #1f2937;
            font-weight: 600;
        }
        tbody tr:nth-child(even) {
            background-color: #f9fafb;
        }

        blockquote {
            border-left: 4px solid #d1d5db;
            margin: 20px 0;
            padding: 8px 16px;
            color: #4b5563;
            background-color: #f9fafb;
        }
        img {
            max-width: 100%;
            height: auto;
        }
    </style>
</head>
<body>
    <div id="content">
        $body
    </div>
</body>
</html>
""")


def extract_title(markdown_text: str) -> str:
    """
    Return the text of the first line starting with '#'.

    Only the first such line is considered. When there is none, or it carries
    no text after the '#', the default title is used.
    """
    match = TITLE_RE.search(markdown_text)
    title = match.group(1).strip() if match else ''
    return title or DEFAULT_TITLE


def compose_page(title: str, body_html: str) -> str:
    """Embed the title and rendered fragment into the styled page skeleton."""
    return PAGE_TEMPLATE.substitute(
        title=title,
        body=body_html,
        font_stylesheet=FONT_STYLESHEET_URL,
        highlight_stylesheet=HIGHLIGHT_STYLESHEET_URL)
