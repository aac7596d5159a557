from setuptools import find_namespace_packages, setup

package_name = "swarmgrid"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.1.0",
    packages=find_namespace_packages(
        include=[package_name, package_name + ".*"]
    ),  # tests are not shipped
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    zip_safe=True,
    description="Reachability classification and attacker placement on grid maps",
    license="MIT",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["swarmgrid = swarmgrid.main:app"],
    },
)
