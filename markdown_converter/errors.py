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

"""Failure kinds that end a conversion run."""

from typing import Sequence


class ConversionError(Exception):
    """Base class for every error reported by the converter."""


class MissingArgumentValue(ConversionError):

    def __init__(self, option: str) -> None:
        super().__init__(f'Option {option} requires a value but none was given.')
        self.option = option


class InvalidExtension(ConversionError):
    """A path does not carry one of the extensions its role allows."""

    def __init__(self, path: str, expected: Sequence[str]) -> None:
        super().__init__(
            'Invalid file extension for "{}": expected one of {}'.format(
                path, ', '.join(expected)))
        self.path = path
        self.expected = tuple(expected)


class InputFileNotFound(ConversionError):

    def __init__(self, path: str) -> None:
        super().__init__(f'File not found at the specified path: "{path}"')
        self.path = path


class ConversionFailure(ConversionError):
    """Any other read, render or write problem; wraps the original exception."""
