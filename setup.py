from setuptools import setup

setup(
    name="intrange",
    version="1.0.0",
    description="Bidirectional iteration over a closed range of integers,"
        " with removal during iteration",
    packages=["intrange"],
    python_requires=">=3.7",
    extras_require={
        "docs": ["sphinx", "python_docs_theme"],
        "test": ["pytest"],
    },
)
