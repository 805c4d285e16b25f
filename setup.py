from setuptools import setup, find_packages

setup(
    name="matrixlib",
    version="1.0",
    description="Exact rational and complex matrix algebra",
    long_description=("Exact rational and complex arithmetic with matrices of such values, offering row echelon "
                      "reduction, determinants, an expression interpreter and numpy, scipy and sympy interoperability"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["matrixlib", "matrixlib.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "rational", "complex", "linear algebra", "exact arithmetic"],
    zip_safe=False,
)
