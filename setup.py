from setuptools import find_packages, setup

setup(
    name="json-request",
    version="0.1.0",
    description="Make JSON calls to HTTP servers",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "httpx >= 0.27.0",
        "typing_extensions >= 4.10",
    ],
    extras_require={
        "requests": ["requests >= 2.31.0"],
        "test": [
            "pytest >= 8.0",
            "requests >= 2.31.0",
        ],
    },
)
