# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirsize",
    version="0.1.0",
    description="Recursive directory size reporting utility, similar to du",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirsize", "dirsize.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirsize=dirsize.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
