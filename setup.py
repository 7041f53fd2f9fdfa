from setuptools import setup, find_packages

setup(name='cyk',
      version='0.9',
      description='CYK chart parsing for grammars in Chomsky Normal Form',
      install_requires=[
          'ordered-set',
          'frozendict',
          'lark',
          'rich',
      ],
      extras_require={
          'test': [
              'coverage',
              'pytest',
              'pytest-cov',
              'pytest-timeout',
          ],
      },
      packages = find_packages(include=['cyk', 'cyk.*']),
)
