#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="wgsl_preprocessor",
        packages=[
            "wgsl_preprocessor",
            "wgsl_preprocessor.literals",
            "wgsl_preprocessor.preprocess",
        ],
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="C-like preprocessor for WGSL shaders",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        url="https://github.com/mirmik/wgsl_preprocessor",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["wgsl", "shader", "preprocessor"],
        classifiers=[],
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": [
                "pytest",
            ],
        },
        zip_safe=False,
    )
