import pytest


def pytest_configure(config):
    for marker, description in [
        ('unit', 'fast, self-contained unit tests'),
        ('escaping', 'tag value escape codec'),
        ('tags', 'tag block parsing and construction'),
        ('prefix', 'message source parsing and construction'),
        ('message', 'full message parsing and construction'),
    ]:
        config.addinivalue_line('markers', '{}: {}'.format(marker, description))


def pytest_addoption(parser):
    # Add option to only run tests for a single area.
    parser.addoption('--only', action='append', default=[], metavar='AREA', help='only run tests marked with AREA')


def pytest_runtest_setup(item):
    only = item.config.getoption('--only')
    if only and not any(area in item.keywords for area in only):
        pytest.skip('skipping test outside of {} (--only given)'.format(', '.join(only)))
