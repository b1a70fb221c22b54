from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "gymnasium",  # Environment adapter in connectfour.game.env
    ],
    extras_require={
        "test": ["pytest"],
    },
)
