from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="rpnexpr",
    description="Infix arithmetic to postfix (RPN) conversion and evaluation with the shunting-yard algorithm.",
    provides=["rpnexpr"],
    license="GPL-3.0-or-later",
    version="0.1.0",
    packages=find_packages(),
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.11",
)
