from setuptools import find_packages, setup

setup(
    name="salesreport",
    version="0.1.0",
    packages=find_packages(include=["salesreport", "salesreport.*"], exclude=["salesreport.tests"]),
    python_requires=">=3.8",
    install_requires=[
        "click",
        "pandas>=1.5",
        "python-dotenv"
    ],
    extras_require={"dev": ["pytest"]},
    entry_points={
        "console_scripts": [
            "sales-report=salesreport.cli.main:cli",
        ]
    },
)
