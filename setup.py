from setuptools import find_packages, setup

setup(
    name="hookline",
    version="0.1.0",
    description="In-process hook registries with ordered batches and sync or async firing",
    packages=find_packages(include=["hookline", "hookline.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["pydantic>=2", "PyYAML>=6"],
    extras_require={"test": ["pytest>=7", "pytest-asyncio>=0.23"]},
)
