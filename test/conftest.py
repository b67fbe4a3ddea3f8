# Copyright 2020 Amazon.com, Inc. or its affiliates. All Rights Reserved.


def pytest_configure(config):
    for marker in ('linter', 'flake8', 'mypy', 'pep257'):
        config.addinivalue_line('markers', f'{marker}: static analysis checks')
