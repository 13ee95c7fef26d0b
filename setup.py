import os
import re
from codecs import open

from setuptools import find_packages
from setuptools import setup

# Based on https://github.com/pypa/sampleproject/blob/main/setup.py
# and https://python-packaging-user-guide.readthedocs.org/

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()
long_description_content_type = "text/markdown"

with open(os.path.join(here, "netmock/version.py")) as f:
    match = re.search(r'VERSION = "(.+?)"', f.read())
    assert match
    VERSION = match.group(1)

setup(
    name="netmock",
    version=VERSION,
    description="In-memory network streams and mock requests for testing HTTP request handlers.",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Testing :: Mocking",
        "Typing :: Typed",
    ],
    packages=find_packages(
        include=[
            "netmock",
            "netmock.*",
        ]
    ),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "dev": [
            "hypothesis>=5.8,<7",
            "pytest-cov>=2.7.1,<6",
            "pytest-timeout>=1.3.3,<3",
            "pytest>=6.1.0,<9",
        ],
    },
)
