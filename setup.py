from setuptools import setup, find_packages

setup(
    name="incident-relay",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "requests>=2.31.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.29.0",
        "python-multipart>=0.0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "incident-relay=relay_web.cli:main",
        ],
    },
    author="Paul",
    author_email="your.email@example.com",
    description="Local web form that relays incidents to the ServiceNow Table API",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/your-org/incident-relay",
)
