# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="laravel-packager",
    version="1.0.0",
    description="Generate Laravel package skeletons: download, folder layout and templated files",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["packager*"]),
    package_data={
        "packager.core.templating": ["templates/*.txt", "files/*", "files/.*"],
        "packager.interface": ["locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'packager=packager.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
