# setup.py
from setuptools import setup, find_packages

setup(
    name="wbmetajson",
    version="1.0.0",
    description="Generates meta.json documents for every directory of a build output",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "wbmetajson": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wbmetajson=wbmetajson.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
