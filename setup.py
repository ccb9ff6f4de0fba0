from setuptools import setup, find_packages
import sys
import os

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.md')).read()
NEWS = open(os.path.join(here, 'NEWS.md')).read()


version = '0.1'

install_requires = [
    'nmigen>=0.3',
    'termcolor',
    'setuptools',
    'wheel',
]

setup(
    name='mdu',
    version=version,
    description="Synthesizeable RTL for a RISC-V style multiply/divide unit.",
    long_description=README + '\n\n' + NEWS,
    long_description_content_type='text/markdown',
    classifiers=[
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Programming Language :: Python :: 3",
    ],
    keywords='RISC-V multiply divide nMigen RTL',
    packages=find_packages(exclude=['test', 'test.*']),
    license='GPLv3+',
    zip_safe=False,
    install_requires=install_requires,
)
