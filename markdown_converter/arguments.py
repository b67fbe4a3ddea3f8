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

import argparse
import logging
import os
import sys
from typing import Iterator
from typing import List
from typing import NamedTuple
from typing import NoReturn
from typing import Optional
from typing import Sequence
from typing import Tuple

from markdown_converter.errors import InvalidExtension
from markdown_converter.errors import MissingArgumentValue

logger = logging.getLogger(__name__)

DEFAULT_INPUT = 'sample.md'
DEFAULT_OUTPUT = 'output.html'
INPUT_EXTENSIONS = ('.md', '.markdown')
OUTPUT_EXTENSIONS = ('.html', '.htm')
OUTPUT_OPTION = '-o/--output'
OUTPUT_FLAGS = ('-o', '--output')
HELP_FLAGS = ('-h', '--help')


class ConversionOptions(NamedTuple):
    input_path: str
    output_path: str
    input_from_default: bool = False
    output_from_flag: bool = False


class _ResolverParser(argparse.ArgumentParser):
    """Argument parser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise MissingArgumentValue(OUTPUT_OPTION)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ResolverParser(
        prog='markdown-to-html',
        description='Convert a Markdown document into a single styled HTML page.',
        usage='%(prog)s [-h] [-o OUTPUT] [input] [output]',
        allow_abbrev=False)
    parser.add_argument(
        '-o', '--output', type=str, default=None,
        help='Path of the HTML file to write; takes precedence over the positional '
             'output argument. Defaults to {}.'.format(DEFAULT_OUTPUT))
    return parser


def _split_tokens(args: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Separate the output and help options from every other token.

    The output flag always takes the next token as its value, so it is rewritten to
    the --output=VALUE form before argparse sees it.
    """
    option_args: List[str] = []
    leftovers: List[str] = []
    tokens: Iterator[str] = iter(args)
    for token in tokens:
        if token in OUTPUT_FLAGS:
            value = next(tokens, None)
            if value is None:
                raise MissingArgumentValue(OUTPUT_OPTION)
            option_args.append(f'--output={value}')
        elif token.startswith('--output=') or token in HELP_FLAGS:
            option_args.append(token)
        else:
            leftovers.append(token)
    return option_args, leftovers


def resolve_arguments(args: Optional[Sequence[str]] = None) -> ConversionOptions:
    """
    Resolve the command line into input and output paths.

    Positional arguments are taken in order: the first is the input Markdown file,
    the second is the output HTML file unless -o/--output was given. Unrecognized
    options and surplus positionals are ignored with a warning.

    :param args: Arguments without the program name; defaults to sys.argv[1:]
    :raises MissingArgumentValue: If -o/--output is the last token
    """
    option_args, leftovers = _split_tokens(sys.argv[1:] if args is None else args)
    parsed = _build_parser().parse_args(option_args)

    positionals: List[str] = []
    for token in leftovers:
        if token.startswith('-') and token != '-':
            logger.warning(f'Ignoring unrecognized option "{token}"')
        else:
            positionals.append(token)

    input_path = DEFAULT_INPUT
    input_from_default = True
    if positionals:
        input_path = positionals[0]
        input_from_default = False

    output_from_flag = parsed.output is not None
    output_path = parsed.output if output_from_flag else DEFAULT_OUTPUT
    if len(positionals) > 1:
        if output_from_flag:
            logger.warning(
                f'Ignoring positional output "{positionals[1]}" in favor of '
                f'{OUTPUT_OPTION} "{parsed.output}"')
        else:
            output_path = positionals[1]
    for extra in positionals[2:]:
        logger.warning(f'Ignoring extra argument "{extra}"')

    return ConversionOptions(
        input_path=input_path,
        output_path=output_path,
        input_from_default=input_from_default,
        output_from_flag=output_from_flag)


def _has_extension(path: str, extensions: Sequence[str]) -> bool:
    return os.path.splitext(path)[1].lower() in extensions


def validate_paths(options: ConversionOptions) -> None:
    """Check the extension contract of both paths before any file is touched."""
    if not _has_extension(options.input_path, INPUT_EXTENSIONS):
        raise InvalidExtension(options.input_path, INPUT_EXTENSIONS)
    if not _has_extension(options.output_path, OUTPUT_EXTENSIONS):
        raise InvalidExtension(options.output_path, OUTPUT_EXTENSIONS)
