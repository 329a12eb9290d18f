# -*- coding: utf-8 -*-

import setuptools
import os

# for some reason os gets munged after this point on Windows, so compute it here.
readme_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.md")

setuptools.setup(
    name="polyui",
    version="0.1.0",
    author="Poly UI Developers",
    description="Poly UI widget toolkit with constrained grid and linear layouts.",
    long_description=open(readme_path).read(),
    long_description_content_type="text/markdown",
    packages=["poly.ui", "poly.ui.test"],
    install_requires=['numpy', 'nionutils>=0.3.19'],
    extras_require={
        "test": ["pytest"],
    },
    license='Apache 2.0',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.9",
    ],
    python_requires=">=3.9",
    test_suite="poly.ui.test",
)
