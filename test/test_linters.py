# Copyright 2020 Amazon.com, Inc. or its affiliates. All Rights Reserved.

import logging
from pathlib import Path

from flake8.api import legacy as flake8
from mypy import api as mypy_api
from pydocstyle import check as pydocstyle_check
from pydocstyle.violations import conventions
import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SOURCE_DIRS = [PACKAGE_ROOT / 'markdown_converter', PACKAGE_ROOT / 'test']

# Missing docstrings are allowed, only the format of present ones is checked
PEP257_IGNORE = {'D100', 'D101', 'D102', 'D103', 'D104', 'D105', 'D106', 'D107'}


def _python_files():
    return sorted(str(path) for source in SOURCE_DIRS for path in source.glob('*.py'))


@pytest.mark.flake8
@pytest.mark.linter
def test_flake8():
    # this logger has been known to default to DEBUG and it is too noisy
    logging.getLogger('flake8').setLevel(logging.INFO)
    style_guide = flake8.get_style_guide(max_line_length=99)
    report = style_guide.check_files(_python_files())
    assert report.total_errors == 0, 'Found Flake8 errors / warnings'


@pytest.mark.mypy
@pytest.mark.linter
def test_mypy():
    stdout, _, return_code = mypy_api.run(
        ['--ignore-missing-imports', str(PACKAGE_ROOT / 'markdown_converter')])
    assert return_code == 0, f'Found mypy errors / warnings:\n{stdout}'


@pytest.mark.linter
@pytest.mark.pep257
def test_pep257():
    select = sorted(set(conventions.pep257) - PEP257_IGNORE)
    errors = list(pydocstyle_check(_python_files(), select=select))
    assert not errors, 'Found pep257 errors / warnings:\n{}'.format(
        '\n'.join(str(e) for e in errors))
