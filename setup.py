from setuptools import setup, find_packages

setup(
    name="plasma_frames",
    version="0.1",
    description="Procedural looping plasma animation rendered to PPM frames",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "plasma-frames=plasma_frames.__main__:main",
        ],
    },
)
