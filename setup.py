from setuptools import setup, find_packages

setup(
    name="hep_varproc",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        # Core numerical packages
        "numpy>=1.24.3",
        "scipy>=1.10.0",  # Shape-preserving interpolation for calibration curves

        # Visualization
        "matplotlib>=3.9.4",

        # Progress bars and utilities
        "tqdm>=4.67.1",

        # Data formats and storage
        "pyyaml>=6.0.2",  # For YAML run configuration files
    ],
    extras_require={
        'dev': [
            'pytest',          # For testing
        ],
    },
    python_requires=">=3.9",

    # Metadata
    description="Likelihood ratio and normalization variable processors for HEP event classification",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Physics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
    ],
)
