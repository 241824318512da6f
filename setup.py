from setuptools import setup, find_packages

setup(
    name="numguess",
    version="0.1.0",
    packages=find_packages(include=["numguess", "numguess.*"]),
    install_requires=[
        "python-dotenv",
        "jsonschema",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "numguess=numguess.terminal.main:main",
        ],
    },
)
