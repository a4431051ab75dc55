from setuptools import find_packages, setup

setup(
    name="dddocs",
    version="0.1.0",
    description="Digital Design Dictionary - documentation site configuration and markdown extensions",
    packages=find_packages(include=["dddocs", "dddocs.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "markdown-it-py>=3.0",  # Markdown token stream and plugin API
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click, breaking click.get_current_context)
        "click",  # CLI context access
        "rich",  # Terminal formatting
        "pyyaml",  # Front matter and YAML output
        "jinja2",  # Component marker templates and bindings
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "dddocs=dddocs.cli:main",
        ],
    },
)
