from setuptools import setup

setup(
    project_urls={
        'Documentation': 'https://optscan.readthedocs.io/',
        'Source': 'https://github.com/optscan/optscan',
        'Tracker': 'https://github.com/optscan/optscan/issues',
    },
    use_scm_version={
        "local_scheme": "no-local-version"
    }
)
