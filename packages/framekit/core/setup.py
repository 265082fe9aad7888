from setuptools import find_namespace_packages, setup

# Physical layout matches the framekit.core import path (no __init__ above subpackages)
packages = find_namespace_packages(where="../..", include=["framekit.core", "framekit.core.*"])

setup(
    name="framekit-core",
    packages=packages,
    package_dir={"": "../.."},
)
