"""
setup.py

Установка пакетов генератора таблицы углов.

Использование:
    pip install -e .            # разработка
    pip install -e .[test]      # + pytest
"""

from setuptools import setup

setup(
    name="corner_pdb",
    version="1.0.0",
    description="Corner pattern database generator for the 3x3x3 cube",
    packages=[
        "analysis",
        "core",
        "cube_io",
        "heuristics",
        "solvers",
        "tools",
        "utils",
        "web",
    ],
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "corner-pdb=main:main",
        ],
    },
    zip_safe=False,
)
