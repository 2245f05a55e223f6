from setuptools import find_packages, setup

setup(
    name="ncline",
    version="0.1.0",
    description="A command shell that loads command modules and dispatches typed commands.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"": ["manual.json", "manual.yaml"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit>=3.0",
        "rich>=13.0",
        "pydantic>=2.0",
        "toml>=0.10",
        "pyyaml>=6.0",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "ncline=ncline.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
    ],
)
