# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="simplelog",
    version="0.9.0",
    description="Leveled, colored and timestamped logging to the console and shared log files",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["simplelog", "simplelog.*"]),
    install_requires=[
        "colorama>=0.4.6",  # just_fix_windows_console
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'simplelog=simplelog.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
