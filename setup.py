import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="estree_to_code",
    version="1.0.0",
    description="Typed ES5 syntax tree with an ESTree JSON codec and a JavaScript source printer",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Software Development :: Compilers",
        "Intended Audience :: Developers",
    ],
    keywords="javascript estree ast code generation minify printer",
    author="François Lagunas",
    author_email="francois.lagunas@gmail.com",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
    ],
    extras_require={
        "validate": [
            "tree-sitter>=0.22.0",
            "tree-sitter-javascript>=0.21.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "tree-sitter>=0.22.0",
            "tree-sitter-javascript>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "estree_to_code=estree_to_code.estree_to_code:estree_to_code",
        ],
    },
    include_package_data=True,
    package_data={
        "estree_to_code": ["templates/*.jinja2", "tests/test_data/*.json", "tests/test_data/*.js"],
    },
    zip_safe=False,
)
