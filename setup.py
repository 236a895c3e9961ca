import setuptools

with open("README.md", "r", encoding = "utf-8") as fh:
	long_description = fh.read()

setuptools.setup(
	name = "pytsvector",
	version = "v1.0.0",
	author = "pytsvector developers",
	description = "PostgreSQL tsvector values for Python: parsing, normalization and canonical text",
	long_description = long_description,
	long_description_content_type = "text/markdown",
	classifiers = [
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: Apache Software License",
		"Operating System :: OS Independent",
	],
	package_dir = {"": "src"},
	packages = setuptools.find_packages(where="src"),
	python_requires = ">=3.7",
	install_requires = [
		"IPython", "graphviz>=0.19"
	]
)
