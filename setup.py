from setuptools import setup, find_packages

with open('requirements.txt', 'r', encoding='utf-8') as f:
    requirements = f.read().splitlines()
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='loxtestgen',
    version='1.0',
    description='Generates the Rust test suite of a Lox bytecode VM from .lox fixtures',
    long_description=long_description,
    long_description_content_type='text/markdown',

    packages=find_packages(include=['loxtestgen', 'loxtestgen.*']),

    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'loxtestgen = loxtestgen.cli:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
