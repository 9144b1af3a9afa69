from setuptools import setup, find_packages

setup(
    name="portfolio-storage",
    version="0.1.0",
    description="Async data-access layer for a portfolio site: content CRUD and admin sessions",
    packages=find_packages(where="src"),  # packages live under src/
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite>=0.19",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "bcrypt>=4.0",
        "fastapi>=0.100",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.24",
        ],
    },
)
