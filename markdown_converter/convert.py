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

import logging
import os
import sys
from typing import Optional
from typing import Sequence

from markdown_converter.arguments import ConversionOptions
from markdown_converter.arguments import DEFAULT_INPUT
from markdown_converter.arguments import resolve_arguments
from markdown_converter.arguments import validate_paths
from markdown_converter.document import compose_page
from markdown_converter.document import extract_title
from markdown_converter.errors import ConversionError
from markdown_converter.errors import ConversionFailure
from markdown_converter.errors import InputFileNotFound
from markdown_converter.render import render_markdown
from markdown_converter.render import Renderer

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

BANNER = '=' * 54


def read_markdown(path: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputFileNotFound(path) from e


def write_html(path: str, content: str) -> str:
    """Write the page, replacing any existing file, and return its absolute path."""
    output_path = os.path.abspath(path)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(content)
    return output_path


def convert_and_wrap(markdown_text: str, renderer: Renderer = render_markdown) -> str:
    """Render Markdown text into a complete, styled HTML page."""
    title = extract_title(markdown_text)
    body_html = renderer(markdown_text)
    return compose_page(title, body_html)


def convert(options: ConversionOptions, renderer: Renderer = render_markdown) -> str:
    """
    Run one conversion for already resolved options.

    :returns: Absolute path of the written HTML file
    :raises ConversionError: On invalid paths, a missing input or any I/O or render failure
    """
    validate_paths(options)
    try:
        markdown_text = read_markdown(options.input_path)
        page = convert_and_wrap(markdown_text, renderer)
        return write_html(options.output_path, page)
    except (OSError, ValueError) as e:
        raise ConversionFailure(str(e)) from e


def report_success(options: ConversionOptions, output_path: str) -> None:
    print(f'\n{BANNER}')
    print('Conversion successful!')
    print(f'Input: {os.path.basename(options.input_path)}')
    print(f'Output saved to: {output_path}')
    print('Open this file in your browser to view the styled documentation.')
    print(f'{BANNER}\n')


def report_failure(error: Exception, options: Optional[ConversionOptions]) -> None:
    logger.error('An error occurred during the conversion process:')
    if isinstance(error, ConversionError) and not isinstance(error, ConversionFailure):
        logger.error(str(error))
    else:
        logger.error(f'Detailed error: {error}')
    if isinstance(error, InputFileNotFound) and options is not None and options.input_from_default:
        logger.error(f"If running without arguments, ensure '{DEFAULT_INPUT}' is present.")


def main(args: Optional[Sequence[str]] = None) -> int:
    options: Optional[ConversionOptions] = None
    try:
        options = resolve_arguments(args)
        if options.input_from_default:
            logger.info(f'No input file provided. Defaulting to: {DEFAULT_INPUT}')
            logger.info('To use a different file, run: markdown-to-html <your-file.md>')
        else:
            logger.info(f'Input file specified: {options.input_path}')
        output_path = convert(options)
        report_success(options, output_path)
    except Exception as e:
        report_failure(e, options)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
