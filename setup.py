#!/usr/bin/env python
'''
   Setup file for the uyuni-tests test suite.
   Use "pip3 install ." in this directory to install the test suite and its dependencies,
   then "playwright install chromium" to get the browser for the web UI tests.
'''

from glob import glob

from setuptools import setup

REQUIREMENTS = ['paramiko', 'playwright', 'pynose', 'PyYAML', 'requests', 'stitches', 'urllib3',
                'xmltodict']

DATAFILES = [('share/uyuni_tests_lib/uyuni_tests', glob('tests/uyuni_tests/test_*.py') +
              ['tests/uyuni_tests/tested_data.yaml'])]

setup(name='uyuni_tests_lib',
      version='1.0',
      description='Uyuni / SUSE Manager Testing Library',
      long_description='libraries to drive the Uyuni web UI, API, and test machines ' +
                       'and facilitate other useful tasks',
      author='Uyuni QE Team',
      author_email='noreply@suse.com',
      platforms='Linux',
      url='https://github.com/uyuni-project/uyuni',
      license="GPLv3+",
      package_dir={'': 'tests'},
      packages=[
          'uyuni_tests_lib'
      ],
      data_files=DATAFILES,
      install_requires=REQUIREMENTS,
      extras_require={'test': ['pytest']},
      zip_safe=False,
      classifiers=[
          'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
          'Programming Language :: Python',
          'Topic :: Software Development :: Libraries :: Python Modules',
          'Operating System :: POSIX',
          'Intended Audience :: Developers',
          'Development Status :: 5 - Production/Stable'
      ],
      scripts=glob('scripts/uyuni-*')
     )
