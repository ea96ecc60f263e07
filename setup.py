from setuptools import setup

setup(
    name="gsheet-datastore",
    version="0.0.1",
    packages=["datastore", "datastore.google", "datastore.pattern", "utils"],
    install_requires=[
        "httpx>=0.23,<1",
        "pydantic>=2.0,<3",
        "terminaltables==3.1.10",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gsheet-datastore=datastore.main:main",
        ],
    },
)
