from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='azmgmt',
    version='0.1.0',
    description='Async client for Azure Security Center, Key Vault and Recovery Services Backup management APIs',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "respx>=0.20",
        ],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    entry_points={
        "console_scripts": [
            "azmgmt=azmgmt_cli.cli:main",
        ],
    }
)
