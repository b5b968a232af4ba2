"""
アルケイン・チェッカーのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="arcane-checkers",
    version="1.0.0",
    description="Arcane Checkers - チェッカーにRPG要素（経験値・レベル・魔法）を加えたゲームエンジン",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.118.0",
        "uvicorn>=0.37.0",
        "pydantic>=2.11.10",
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "httpx>=0.27.0",
        ],
    },
)
