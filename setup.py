#!/usr/bin/env python

import os
import re
from fnmatch import fnmatch

from setuptools import setup


def ispackage(x):
    return os.path.isdir(x) and os.path.exists(os.path.join(x, '__init__.py'))


def istestdir(x):
    return os.path.isdir(x) and not os.path.exists(os.path.join(x, '__init__.py'))


def find_packages(where='mathspace', exclude=('*__pycache__*',),
                  predicate=ispackage):
    func = lambda x: predicate(x) and not any(fnmatch(x, exc)
                                              for exc in exclude)
    return list(filter(func, [x[0] for x in os.walk(where)]))


packages = find_packages()
testdirs = find_packages(predicate=(lambda x: istestdir(x) and
                                    os.path.basename(x) == 'tests'))

package_data = [os.path.join(x.replace('mathspace' + os.sep, ''), '*.py')
                for x in testdirs]


def read(filename):
    with open(filename, 'r') as f:
        return f.read()


def read_reqs(filename):
    return read(filename).strip().splitlines()


def version():
    return re.search(r"^__version__ = '([^']+)'",
                     read(os.path.join('mathspace', '__init__.py')),
                     re.M).group(1)


def extras_require():
    return {req: read_reqs('etc/requirements_%s.txt' % req)
            for req in {'test'}}

if __name__ == '__main__':
    setup(name='mathspace',
          version=version(),
          description='Extensible math namespace with runtime imports',
          long_description=read('README.rst'),
          install_requires=read_reqs('etc/requirements.txt'),
          extras_require=extras_require(),
          python_requires='>=3.6',
          license='BSD',
          classifiers=['Development Status :: 2 - Pre-Alpha',
                       'Intended Audience :: Developers',
                       'Intended Audience :: Science/Research',
                       'License :: OSI Approved :: BSD License',
                       'Operating System :: OS Independent',
                       'Programming Language :: Python :: 3',
                       'Topic :: Scientific/Engineering :: Mathematics',
                       'Topic :: Utilities'],
          package_data={'mathspace': package_data},
          packages=packages)
