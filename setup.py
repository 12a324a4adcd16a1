# Package installation script

from setuptools import setup, find_packages

setup(
    name="smart_hub",
    version="0.1.0",
    packages=find_packages(where="src", include=["smart_hub", "smart_hub.*"]),
    package_dir={"": "src"},
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "smart_hub=smart_hub.__main__:main",
        ],
    },
    install_requires=[
        "fastapi",
        "hypercorn",
        "pyyaml",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
)
