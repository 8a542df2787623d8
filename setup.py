from setuptools import setup, find_packages

setup(
    name="sudogen",
    version="1.0.0",
    description="Sudoku solution generator and unique-puzzle builder",
    packages=find_packages(include=["sudogen", "sudogen.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.6.0",
        "seaborn>=0.12.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudogen=sudogen.cli:main",
        ],
    },
)
