#!/usr/bin/env python

from setuptools import setup, find_packages
import httpwarn

setup(name='httpwarn',
      version=httpwarn.__version__,
      description='Parse, check and format HTTP Warning header values.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(include=['httpwarn', 'httpwarn.*']),
      package_dir={'httpwarn': 'httpwarn'},
      python_requires=">=3.8",
      install_requires=[
          'thor >= 0.9.0',
          'markdown >= 3.0',
          'markupsafe >= 2.0',
          'netaddr >= 0.10.0',
          'typing-extensions >= 4.0',
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest',
          ]
      },
      entry_points={
          'console_scripts': [
              'httpwarn=httpwarn.cli:main',
          ],
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Testing',
        'License :: OSI Approved :: MIT License',
      ],
)
