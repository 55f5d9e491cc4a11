# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="palantir",
    version="0.1.0",
    description="Terminal presentation library: leveled messages and tree rendering",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["palantir", "palantir.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'palantir-demo=palantir.interface.demo:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
