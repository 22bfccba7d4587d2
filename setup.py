from setuptools import setup, find_packages

setup(
    name="amm_console",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "console", "main"],
    install_requires=[
        "web3>=7.0.0",
        "python-dotenv>=0.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "amm-console=main:main",
        ],
    },
    description="Interactive console for deploying and exercising an AMM factory, pool and test tokens",
    keywords="blockchain, ethereum, amm, web3, liquidity, swap",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
