from setuptools import setup, find_packages

setup(
    name="rigidmotion",
    version="1.0.0",
    description="Quaternion, dual quaternion and 4x4 matrix algebra for rigid body transformations",
    packages=find_packages(exclude=["unittests", "unittests.*"]),
    python_requires=">=3.11",
    install_requires=["numpy", "pandas"],
    extras_require={"test": ["pytest", "scipy"]},
)
