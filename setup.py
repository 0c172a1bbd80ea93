# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="charcounter",
    version="0.1.0",
    description="Recursively count text files and per-character frequencies under a path",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["charcounter*"]),
    python_requires=">=3.9",
    install_requires=[
        "tabulate>=0.8.3",  # Frequency table rendering
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'charcounter=charcounter.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
