import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='minitensor',
    version='0.0.1',
    description='A minimal immutable tensor value type with reshape, Hadamard product and index select',
    long_description=long_description,
    packages=setuptools.find_packages(include=['minitensor', 'minitensor.*']),
    python_requires='>=3.8',
    install_requires=['numpy', 'prettyprinter'],
    extras_require={'test': ['pytest']},
)
