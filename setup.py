import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="spannergen",
    version="0.1.0",
    author="Robert Myers",
    author_email="robert@julython.org",
    description="Render Go and Cloud Spanner code from GraphQL schema templates",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["graphql-core>=3.2", "jinja2>=3.1", "tomli>=2.0"],
    extras_require={"test": ["pytest", "pytest-mock"]},
    entry_points={"console_scripts": ["spannergen=spannergen.cli:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
