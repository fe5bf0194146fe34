from setuptools import setup

setup(
    name='ircline',
    version='0.1.0',
    packages=[
        'ircline'
    ],
    install_requires=[],
    extras_require={
        'docs': ['sphinx', 'sphinx_rtd_theme'],   # the Sphinx theme we use
        'tests': 'pytest',                        # collect and run tests
        'coverage': 'pytest-cov'                  # get test case coverage
    },

    keywords='irc ircv3 protocol parser message tags',
    description='A compact, lenient parser and constructor for IRC protocol lines.',
    license='BSD',

    python_requires='>=3.6',
    zip_safe=True,
    test_suite='tests'
)
