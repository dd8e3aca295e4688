from setuptools import setup, find_packages

setup(
    name="matcalc",
    version="1.0",
    description="Interactive calculator for dense matrices",
    long_description=("Interactive calculator for dense matrices, offering Gaussian and Gauss-Jordan elimination, "
                      "determinants, adjugates and inverses, and an evaluator for infix matrix expressions"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["matcalc", "matcalc.*"]),
    install_requires=["numpy>=1.17"],
    extras_require={
        "test": ["pytest", "pytest-timeout", "scipy", "sympy"],
    },
    entry_points={
        "console_scripts": ["matcalc=matcalc.repl:main"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Intended Audience :: Education", "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9", "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12", "Natural Language :: English",
        "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "linear algebra", "gaussian elimination", "calculator"],
    zip_safe=False,
)
