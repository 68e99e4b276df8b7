#! /usr/bin/env python
""" Distribution file for xctype. """
import os

from setuptools import setup

HERE = os.path.dirname(__file__)
README = 'README.rst'


setup(name='xctype',
      version='1.0.0',
      description=("Locale-independent ctype character classification "
                   "for text, byte strings and code points"),
      long_description=open(os.path.join(HERE, README)).read(),
      long_description_content_type='text/x-rst',
      keywords="ctype ascii character classification isalnum isprint",
      license='ISC',
      packages=['xctype'],
      python_requires='>=3.7',
      install_requires=[
          'blessed>=1.17.8,<2',
          'wcwidth>=0.2.4,<1',
      ],
      extras_require={
          'tests': (
              'pytest>=6',
          )
      },
      entry_points={
          'console_scripts': ['xctype=xctype.engine:main'],
      },
      classifiers=[
          'Environment :: Console',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: ISC License (ISCL)',
          'Natural Language :: English',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries',
          'Topic :: Text Processing',
      ],
      zip_safe=False,
)
