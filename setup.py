from setuptools import setup

setup(
    name = 'PSyntax',
    version = '0.1',
    description = 'Scheme scanner, reader and syntax tree',
    long_description=open("README.rst", 'r').read(),
    author = "PSyntax Contributors",
    license = "BSD",
    keywords = "scheme r5rs lexer scanner reader syntax-tree hygiene",
    classifiers = [
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: BSD License",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Compilers",
        "Topic :: Software Development :: Interpreters",
        "Programming Language :: Scheme",
        "Programming Language :: Lisp",
        ],
    python_requires='>=3.6',
    install_requires=[],
    extras_require={'test': ['pytest']},
    provides=['PSyntax'],
    packages = ['PSyntax', 'PSyntax.tests'],
    test_suite = 'PSyntax.tests',
    )
