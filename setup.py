from setuptools import setup, find_packages

version = '0.1'

setup(name='Yaystash',
      version=version,
      description="Declarative installation and configuration of the Logstash agent",
      long_description = open("README.rst").read() + "\n" + \
                         open("CHANGES").read(),
      author="Isotoma Limited",
      author_email="support@isotoma.com",
      license="Apache Software License",
      classifiers = [
          "Intended Audience :: System Administrators",
          "Operating System :: POSIX",
          "License :: OSI Approved :: Apache Software License",
          "Programming Language :: Python :: 3",
      ],
      packages=find_packages(exclude=['ez_setup']),
      package_data={
          'yaystash': ['templates/*.j2', 'data/*.yaml'],
          },
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.8',
      install_requires=[
          'setuptools',
          'jinja2',
          'PyYAML',
      ],
      extras_require = {
          'test': ['mock'],
          },
      entry_points = """
      [console_scripts]
      yaystash = yaystash.main:main
      """
      )
