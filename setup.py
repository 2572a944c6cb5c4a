"""Setup script for the in-memory video library player."""

from setuptools import setup, find_namespace_packages

setup(
    name="videoplayer",
    version="0.1.0",
    description="In-memory video library with playback, playlists, search and flagging",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "videoplayer=videoplayer.cli:main",
        ]
    },
)
