#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from setuptools import find_packages, setup

setup(
    name="gitstream",
    version="0.1.0",
    description="Parse and resolve git:// locators addressing files inside repositories",
    packages=find_packages(include=["gitstream", "gitstream.*"]),
    package_data={"gitstream": ["config-schema.yml"]},
    python_requires=">=3.10",
    install_requires=open("requirements.txt", encoding="utf-8").readlines(),  # noqa: SIM115
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["gitstream=gitstream.cli:main"]},
)
