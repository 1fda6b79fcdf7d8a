# setup.py
from setuptools import setup, find_packages

setup(
    name="auction_scout",
    version="0.1.0",
    description="Сборщик аукционов с сайтов в Google-таблицу",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "soupsieve>=2.5",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "gspread>=6.0",
        "google-auth>=2.20",
        "requests>=2.31",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "auction-scout=auction_scout.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
