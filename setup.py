import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

def parse_requirements(filename):
    """ load requirements from a pip requirements file """
    lineiter = (line.strip() for line in open(filename))
    return [line for line in lineiter if line and not line.startswith("#")]

install_reqs = parse_requirements('requirements.txt')

setuptools.setup(
    name="planeviz",
    version="1.0.0",
    author="Leddartech",
    description="Plane frame, projection and ray intersection core of the plane visualizer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=[
        'planeviz',
        'planeviz.common',
        'planeviz.common.types'
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=install_reqs,
    extras_require={
        'test': ['pytest>=7']
    },
    python_requires='>=3.7'
)
