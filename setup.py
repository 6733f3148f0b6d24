#!/usr/bin/env python3

from setuptools import find_namespace_packages, setup


def get_version():
    with open("debian/changelog", "r", encoding="utf-8") as f:
        return f.readline().split()[1][1:-1]


setup(
    name="fog-aliyun-gtw",
    version=get_version(),
    description="Fog cloud to Aliyun IoT downlink topic and payload gateway",
    license="MIT",
    maintainer="Fog Cloud Team",
    maintainer_email="dev@fogcloud.io",
    url="https://github.com/fogcloud-io/fog-aliyun-gtw",
    python_requires=">=3.8",
    packages=find_namespace_packages(include=["fog.*"]),
    install_requires=[
        "fastapi",
        "pydantic>=2",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "fog-aliyun-gtw = fog.aliyun_gtw.cli.main:main",
        ],
    },
)
