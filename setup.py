from setuptools import setup, find_packages

setup(
    name="indexed_heap",
    version="0.1.0",
    description="Array-backed indexed binary max-heap with heap sort and k-th max extraction",
    packages=find_packages(),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "psutil",
            "pytest",
        ],
    },
    zip_safe=False,
)
