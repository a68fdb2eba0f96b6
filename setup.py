from setuptools import setup


setup(
    version="1.0.0",
    name="dcm-json",
    description=(
        "JSON-serialization helpers for the Digital Curation Manager "
        + "based on dynamically loaded JSON libraries"
    ),
    author="LZV.nrw",
    license="MIT",
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "orjson": [
            "orjson>=3.9",
        ],
        "simplejson": [
            "simplejson>=3.19",
        ],
        "test": [
            "pytest>=7",
            "orjson>=3.9",
            "simplejson>=3.19",
        ],
    },
    packages=[
        "dcm_json",
        "dcm_json.backend",
    ],
    package_data={
        "dcm_json": ["py.typed"],
    },
)
