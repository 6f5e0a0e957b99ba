from setuptools import setup, find_namespace_packages

setup(
    name="bookcase",
    version="0.1.0",
    packages=find_namespace_packages(include=['bookcase*', 'api*', 'cli*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "pydantic>=2",
        "requests",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",  # FastAPI TestClient
        ],
    },
    entry_points={
        "console_scripts": [
            "bookcase=cli.main:main",
        ],
    },
)
