#!/usr/bin/env python
from setuptools import setup, find_packages


setup(name='django-oscar-saferpay',
      version='0.1.0',
      author="django-oscar-saferpay contributors",
      description="Saferpay payment module for django-oscar",
      long_description=open('README.rst').read(),
      keywords="Payment, Saferpay",
      license='BSD',
      packages=find_packages(exclude=['sandbox*', 'tests*']),
      include_package_data=True,
      python_requires='>=3.8',
      install_requires=[
          'django>=3.2',
          'django-oscar>=3.1',
      ],
      extras_require={
          'test': [
              'mock>=4.0',
              'pytest>=7.0',
              'pytest-django>=4.5',
          ],
      },
      # See http://pypi.python.org/pypi?%3Aaction=list_classifiers
      classifiers=[
          'Environment :: Web Environment',
          'Framework :: Django',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Operating System :: Unix',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
      ]
    )
