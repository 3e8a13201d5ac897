from setuptools import setup, find_packages

setup(
    name="fileselector",
    version="0.1.0",
    description="A frame-driven file selector state machine with a pywebview bridge",
    author="Ghua8088",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pywebview",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fileselector=fileselector.cli:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
